"""
Console output utilities for the command-line tool.

Wraps a shared rich Console so commands print status lines consistently,
and installs rich logging when the CLI starts.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_INFO = "ℹ️"

_console = Console()


def get_console() -> Console:
    """Get the shared console."""
    return _console


def print_success(message: str, console: Console | None = None) -> None:
    """Print success message with emoji."""
    (console or _console).print(f"{EMOJI_SUCCESS} {message}", style="green")


def print_error(message: str, console: Console | None = None) -> None:
    """Print error message with emoji."""
    (console or _console).print(
        f"{EMOJI_ERROR} {message}", style="bold red", highlight=False, markup=False
    )


def print_info(message: str, console: Console | None = None) -> None:
    """Print info message with emoji."""
    (console or _console).print(f"{EMOJI_INFO} {message}", style="cyan")


def print_exception_chain(error: BaseException, console: Console | None = None) -> None:
    """Print an error followed by each underlying cause, innermost last."""
    print_error(str(error), console)
    cause = error.__cause__
    depth = 1
    while cause is not None:
        (console or _console).print(
            f"{'  ' * depth}caused by {type(cause).__name__}: {cause}",
            style="red",
            highlight=False,
            markup=False,
        )
        cause = cause.__cause__
        depth += 1


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route library logging through rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or _console, show_path=False)],
        force=True,
    )
