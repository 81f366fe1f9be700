"""
perfgate Command Line Interface

Statistical performance regression checks for benchmark sample files.
"""

import argparse
import logging
import sys

from .. import __version__
from ..core.errors import PerfGateError, format_error_chain
from ..statistics.verdict import ExitCode
from .baseline import BaselineCommand, CheckCommand
from .compare import CompareCommand
from .stats import StatsCommand

logger = logging.getLogger("perfgate")


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(message)s"
    )
    logging.getLogger("perfgate").setLevel(level)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the perfgate CLI.

    Returns:
        int: 0 for no regression, 1 for a regression, 2 for an error
    """
    parser = argparse.ArgumentParser(
        prog='perfgate',
        description='perfgate: statistical performance regression detection',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  perfgate stats samples.json
  perfgate compare --baseline baseline.json --current current.json
  perfgate baseline save render-moderate samples.json
  perfgate check render-moderate current.json

For command-specific help:
  perfgate <command> --help
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only log warnings and errors')

    # Add subcommands
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='<command>'
    )

    # Register commands
    StatsCommand.register(subparsers)
    CompareCommand.register(subparsers)
    BaselineCommand.register(subparsers)
    CheckCommand.register(subparsers)

    # Parse arguments
    if args is None:
        args = sys.argv[1:]

    parsed_args = parser.parse_args(args)
    _configure_logging(parsed_args.verbose, parsed_args.quiet)

    if not parsed_args.command:
        parser.print_help()
        return int(ExitCode.ERROR)

    commands = {
        'stats': StatsCommand,
        'compare': CompareCommand,
        'baseline': BaselineCommand,
        'check': CheckCommand,
    }

    try:
        return int(commands[parsed_args.command].execute(parsed_args))
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130
    except (PerfGateError, OSError, ValueError) as e:
        logger.debug(format_error_chain(e))
        print(f"Error: {e}")
        return int(ExitCode.ERROR)


if __name__ == '__main__':
    sys.exit(main())
