"""
Preview command - generate and display anonymous instances of a type.
"""

import builtins
import dataclasses
import importlib
import logging
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from ..config.settings import EngineSettings
from ..core.engine import AnonymousData
from ..domain.populate_option import PopulateOption
from ..utilities.console import get_console, print_exception_chain, print_error
from ..utilities.constants import AnonymousDataError, ValidationError
from ..utilities.formatters import format_type, format_value

logger = logging.getLogger(__name__)


def resolve_type_path(path: str) -> Any:
    """
    Import a type from 'package.module:Name', 'package.module.Name' or a builtin name.

    Raises:
        ImportError: If the module cannot be imported
        AttributeError: If the module has no such attribute
        ValueError: If the path is empty
    """
    if not path or not path.strip():
        raise ValueError("Type path cannot be empty")

    path = path.strip()
    if ":" in path:
        module_name, qualname = path.split(":", 1)
    elif "." in path:
        module_name, qualname = path.rsplit(".", 1)
    else:
        return getattr(builtins, path)

    target: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        target = getattr(target, part)
    return target


def _member_rows(value: Any) -> list[tuple[str, str, str]]:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = [f.name for f in dataclasses.fields(value)]
    else:
        names = [name for name in getattr(value, "__dict__", {}) if not name.startswith("_")]

    rows = []
    for name in names:
        member_value = getattr(value, name, None)
        rows.append((name, type(member_value).__name__, format_value(member_value)))
    return rows


def render_value(value: Any, title: str) -> Panel:
    """Render a generated value as a panel; objects get a member table."""
    # Type names such as list[int] would otherwise be read as markup
    heading = Text(title)
    rows = _member_rows(value)
    if not rows:
        return Panel(Pretty(value), title=heading, border_style="cyan")

    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("Member", style="bold")
    table.add_column("Type", style="dim")
    table.add_column("Value")
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))
    return Panel(table, title=heading, border_style="cyan")


def preview_command(
    type_path: str,
    seed: int | None = None,
    populate: str = PopulateOption.DEEP.value,
    count: int = 1,
    console: Console | None = None,
) -> int:
    """Generate ``count`` instances of a type and print them. Returns the exit code."""
    console = console or get_console()

    try:
        target = resolve_type_path(type_path)
    except (ImportError, AttributeError, ValueError) as e:
        print_error(f"Cannot import {type_path}: {e}", console)
        return 1

    try:
        data = AnonymousData(seed, settings=EngineSettings.from_environment())
    except ValidationError as e:
        print_error(f"Invalid settings: {e}", console)
        return 1

    option = PopulateOption(populate)
    logger.info(f"Previewing {format_type(target)} (populate={option.value}, count={count})")

    for index in range(count):
        try:
            value = data.any(target, option)
        except AnonymousDataError as e:
            print_exception_chain(e, console)
            return 1
        console.print(render_value(value, f"{format_type(target)} #{index + 1}"))

    return 0
