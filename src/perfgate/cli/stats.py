"""
Statistics command for the perfgate CLI.

Prints descriptive statistics for a sample file, including any auxiliary
metrics it carries.
"""

import argparse
import json

from ..core.config import ComparisonConfig, CriticalValueMethod
from ..regression.reporting import format_statistics_report
from ..statistics.descriptive import compute_statistics
from ..statistics.verdict import ExitCode
from .io import load_measurements


class StatsCommand:
    """Stats command implementation."""

    @staticmethod
    def register(subparsers) -> None:
        """Register the stats command with argument parser."""
        parser = subparsers.add_parser(
            'stats',
            help='Describe a sample file',
            description='Compute descriptive statistics for a sample file',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  perfgate stats current.json
  perfgate stats current.json --unit us --json
            """
        )
        parser.add_argument('file', help='Sample file (JSON)')
        parser.add_argument('--unit', default='ms', help='Unit of the primary metric (default: ms)')
        parser.add_argument(
            '--method',
            choices=[m.value for m in CriticalValueMethod],
            help='Critical value method for confidence intervals'
        )
        parser.add_argument('--json', action='store_true', help='Print JSON instead of text')

    @staticmethod
    def execute(args) -> int:
        """Execute the stats command."""
        config = ComparisonConfig.from_env()
        if args.method:
            config.update(critical_value_method=args.method)

        measurements = load_measurements(args.file)
        stats = compute_statistics(
            measurements.samples, config.confidence_level, config.critical_value_method, measurements.label
        )
        metric_stats = measurements.metric_statistics(config.confidence_level, config.critical_value_method)

        if args.json:
            print(json.dumps({
                'label': measurements.label,
                'statistics': stats.to_dict(),
                'metrics': {name: s.to_dict() for name, s in metric_stats.items()},
            }, indent=2))
            return ExitCode.SUCCESS

        print(format_statistics_report(stats, unit=args.unit, title=measurements.label))
        for name, metric in metric_stats.items():
            print()
            print(format_statistics_report(metric, unit="", title=name))
        return ExitCode.SUCCESS
