"""
Compare command for the perfgate CLI.

Compares a current sample file against a baseline sample file and exits
with 0 (no regression), 1 (regression) or 2 (error).
"""

import argparse
import json
import logging
from pathlib import Path

from ..core.config import ComparisonConfig, CriticalValueMethod
from ..regression.detector import RegressionDetector
from ..regression.reporting import format_comparison_report
from ..statistics.comparison import ComparisonResult
from ..statistics.verdict import verdict
from .io import load_measurements

logger = logging.getLogger(__name__)


def add_comparison_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command that runs a comparison."""
    parser.add_argument(
        '--alpha',
        type=float,
        help='Significance level in (0, 1) (default: 0.05 or PERFGATE_SIGNIFICANCE_LEVEL)'
    )
    parser.add_argument(
        '--method',
        choices=[m.value for m in CriticalValueMethod],
        help='Critical value method (default: table)'
    )
    parser.add_argument('--unit', default='ms', help='Unit of the primary metric (default: ms)')
    parser.add_argument('--json', dest='json_output', metavar='FILE', help='Also write the result as JSON to FILE')


def build_config(args) -> ComparisonConfig:
    """Environment defaults overridden by command line flags."""
    config = ComparisonConfig.from_env()
    overrides = {}
    if getattr(args, 'alpha', None) is not None:
        overrides['significance_level'] = args.alpha
    if getattr(args, 'method', None):
        overrides['critical_value_method'] = args.method
    if overrides:
        config.update(**overrides)
    return config


def emit_result(result: ComparisonResult, args, title: str = "PERFORMANCE TEST RESULTS") -> int:
    """Print the report, optionally write JSON, and return the exit code."""
    outcome = verdict(result)
    print(format_comparison_report(result, unit=args.unit, title=title))

    if getattr(args, 'json_output', None):
        payload = result.to_dict()
        payload['verdict'] = outcome.value
        path = Path(args.json_output)
        with open(path, 'w') as f:
            json.dump(payload, f, indent=2)
        logger.info(f"Wrote comparison result to {path}")

    return outcome.exit_code


class CompareCommand:
    """Compare command implementation."""

    @staticmethod
    def register(subparsers) -> None:
        """Register the compare command with argument parser."""
        parser = subparsers.add_parser(
            'compare',
            help='Compare two sample files',
            description='Detect a statistically significant change between two sample files',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Exit codes:
  0 - no regression (unchanged or improved)
  1 - performance regression detected
  2 - error before a comparison could be made

Examples:
  perfgate compare --baseline baseline.json --current current.json
  perfgate compare -b baseline.json -c current.json --alpha 0.01 --json result.json
            """
        )
        parser.add_argument('--baseline', '-b', required=True, help='Baseline sample file (JSON)')
        parser.add_argument('--current', '-c', required=True, help='Current sample file (JSON)')
        add_comparison_arguments(parser)

    @staticmethod
    def execute(args) -> int:
        """Execute the compare command."""
        config = build_config(args)
        baseline = load_measurements(args.baseline, label="baseline")
        current = load_measurements(args.current, label="current")

        result = RegressionDetector(config).compare(baseline, current)
        return emit_result(result, args)
