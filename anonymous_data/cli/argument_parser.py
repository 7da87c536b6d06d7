"""
Argument parsing for the Anonymous Data CLI.

Keeps parser construction separate from command execution so the parser
can be tested on its own.
"""

import argparse

from ..domain.populate_option import PopulateOption


def _seed(value: str) -> int:
    """Parse a seed given in decimal or with a 0x/0o/0b prefix."""
    try:
        return int(value, 0)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid seed: {value!r}") from e


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"count must be at least 1, got {number}")
    return number


class CLIArgumentParser:
    """
    Argument parser for the preview and scalars commands.
    """

    def __init__(self):
        """Initialize the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="anonymous-data",
            description="Generate anonymous values for test fixtures",
        )
        self.parser.add_argument(
            "-v", "--verbose", action="store_true", help="Show resolution debug logging"
        )
        self.subparsers = self.parser.add_subparsers(dest="command", help="Available commands")
        self._setup_all_parsers()

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def _setup_all_parsers(self) -> None:
        """Set up all command parsers."""
        parser_preview = self.subparsers.add_parser(
            "preview", help="Generate and display instances of a type"
        )
        parser_preview.add_argument(
            "type_path", help="Type to generate, e.g. 'myapp.models:Order' or 'int'"
        )
        parser_preview.add_argument(
            "--seed", type=_seed, default=None, help="Seed for the random stream"
        )
        parser_preview.add_argument(
            "--populate",
            choices=[option.value for option in PopulateOption],
            default=PopulateOption.DEEP.value,
            help=f"Population of generated instances (default: {PopulateOption.DEEP.value})",
        )
        parser_preview.add_argument(
            "--count", type=_positive_int, default=1, help="Number of instances (default: 1)"
        )

        parser_scalars = self.subparsers.add_parser(
            "scalars", help="List scalar types with a sample value each"
        )
        parser_scalars.add_argument(
            "--seed", type=_seed, default=None, help="Seed for the random stream"
        )


def create_cli_parser() -> CLIArgumentParser:
    """
    Factory function to create CLI argument parser.

    Returns:
        Configured CLIArgumentParser instance
    """
    return CLIArgumentParser()
