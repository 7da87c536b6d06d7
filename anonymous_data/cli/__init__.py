"""
Command-line interface for Anonymous Data.

Separates argument parsing from command execution.
"""

import logging

from ..commands import preview_command, scalars_command
from ..utilities.console import configure_logging, print_error
from .argument_parser import create_cli_parser

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = create_cli_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "preview":
            return preview_command(args.type_path, args.seed, args.populate, args.count)
        if args.command == "scalars":
            return scalars_command(args.seed)

        parser.parser.print_help()
        return 0

    except KeyboardInterrupt:
        return 130
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print_error(f"Unexpected error: {e}")
        return 1
