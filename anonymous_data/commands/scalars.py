"""
Scalars command - list the scalar types the default primitive factory handles.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core.engine import AnonymousData
from ..primitives.factory import PrimitiveFactory
from ..utilities.console import get_console
from ..utilities.formatters import format_type, format_value


def scalars_command(seed: int | None = None, console: Console | None = None) -> int:
    """Print every registered scalar type with a sample value. Returns the exit code."""
    console = console or get_console()
    data = AnonymousData(seed)

    table = Table(title="Scalar factories", header_style="bold cyan")
    table.add_column("Type", style="bold")
    table.add_column("Sample")

    for type_ in PrimitiveFactory().factories():
        table.add_row(Text(format_type(type_)), Text(format_value(data.any(type_))))

    console.print(table)
    return 0
