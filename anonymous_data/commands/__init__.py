"""
Commands package for the Anonymous Data CLI tool.

Each command is in its own module and returns a process exit code.
"""

from .preview import preview_command, render_value, resolve_type_path
from .scalars import scalars_command

__all__ = [
    "preview_command",
    "render_value",
    "resolve_type_path",
    "scalars_command",
]
