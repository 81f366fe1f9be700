"""
Baseline management commands for the perfgate CLI.

`baseline save` / `baseline show` manage stored baselines; `check` compares a
sample file against the stored baseline for a key.
"""

import argparse
import json

from ..regression.baseline_store import JsonBaselineStore
from ..regression.detector import RegressionDetector
from ..regression.reporting import format_statistics_report
from ..statistics.verdict import ExitCode, verdict
from .compare import add_comparison_arguments, build_config, emit_result
from .io import load_measurements

DEFAULT_STORE = "baselines"


class BaselineCommand:
    """Baseline command implementation."""

    @staticmethod
    def register(subparsers) -> None:
        """Register the baseline command with argument parser."""
        parser = subparsers.add_parser(
            'baseline',
            help='Save or inspect stored baselines',
            description='Manage stored performance baselines',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  perfgate baseline save render-moderate samples.json --store baselines
  perfgate baseline show render-moderate --store baselines
  perfgate baseline list --store baselines
            """
        )
        actions = parser.add_subparsers(dest='baseline_action', metavar='<action>')

        save = actions.add_parser('save', help='Store a sample file as the baseline for KEY')
        save.add_argument('key', help='Baseline key (letters, digits, . _ -)')
        save.add_argument('file', help='Sample file (JSON)')
        save.add_argument('--store', default=DEFAULT_STORE, help=f'Baseline directory (default: {DEFAULT_STORE})')

        show = actions.add_parser('show', help='Print statistics of the baseline for KEY')
        show.add_argument('key', help='Baseline key')
        show.add_argument('--store', default=DEFAULT_STORE, help=f'Baseline directory (default: {DEFAULT_STORE})')
        show.add_argument('--unit', default='ms', help='Unit of the primary metric (default: ms)')

        listing = actions.add_parser('list', help='List stored baselines')
        listing.add_argument('--store', default=DEFAULT_STORE, help=f'Baseline directory (default: {DEFAULT_STORE})')

    @staticmethod
    def execute(args) -> int:
        """Execute the baseline command."""
        action = getattr(args, 'baseline_action', None)
        if not action:
            print("Missing action: use 'save', 'show' or 'list'")
            return ExitCode.ERROR

        store = JsonBaselineStore(args.store)

        if action == 'save':
            measurements = load_measurements(args.file, label=args.key)
            store.save(args.key, measurements)
            print(format_statistics_report(measurements.statistics, title=f"Baseline '{args.key}'"))
            print()
            print("Baseline created successfully")
            return ExitCode.SUCCESS

        if action == 'show':
            measurements = store.load(args.key)
            print(format_statistics_report(measurements.statistics, unit=args.unit, title=f"Baseline '{args.key}'"))
            return ExitCode.SUCCESS

        print(json.dumps(store.get_summary(), indent=2))
        return ExitCode.SUCCESS


class CheckCommand:
    """Check command implementation."""

    @staticmethod
    def register(subparsers) -> None:
        """Register the check command with argument parser."""
        parser = subparsers.add_parser(
            'check',
            help='Compare a sample file against a stored baseline',
            description='Compare a sample file against the stored baseline for KEY',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Exit codes:
  0 - no regression, 1 - regression, 2 - error (e.g. missing baseline)

Examples:
  perfgate check render-moderate current.json --store baselines --save-result
            """
        )
        parser.add_argument('key', help='Baseline key')
        parser.add_argument('file', help='Current sample file (JSON)')
        parser.add_argument('--store', default=DEFAULT_STORE, help=f'Baseline directory (default: {DEFAULT_STORE})')
        parser.add_argument('--save-result', action='store_true', help='Archive the comparison in the store')
        add_comparison_arguments(parser)

    @staticmethod
    def execute(args) -> int:
        """Execute the check command."""
        config = build_config(args)
        store = JsonBaselineStore(args.store)
        current = load_measurements(args.file, label=args.key)

        result = RegressionDetector(config).check(store, args.key, current)
        exit_code = emit_result(result, args, title=f"PERFORMANCE TEST RESULTS: {args.key}")

        if args.save_result:
            payload = result.to_dict()
            payload['verdict'] = verdict(result).value
            path = store.save_result(args.key, payload)
            print(f"\nSaved test result to {path}")

        return exit_code
