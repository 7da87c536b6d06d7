"""
Formatting utilities for type names, members, and generated values.

Used by error messages, log lines, and the preview CLI so that types are
always displayed the same way.
"""

from typing import Any

from ..domain.member import Member

MAX_VALUE_WIDTH = 60


def format_type(type_: Any) -> str:
    """Format a type descriptor for display (e.g. 'tests.models.Order' or 'list[int]')."""
    if type_ is None:
        return "None"

    if isinstance(type_, type) and not getattr(type_, "__args__", None):
        module = type_.__module__
        if module == "builtins":
            return type_.__qualname__
        return f"{module}.{type_.__qualname__}"

    # Generic aliases and typing special forms already render readably
    return repr(type_).replace("typing.", "")


def format_member(member: Member) -> str:
    """Format a member descriptor as 'Owner.name'."""
    return f"{format_type(member.owner)}.{member.name}"


def format_value(value: Any, width: int = MAX_VALUE_WIDTH) -> str:
    """Format a generated value for tabular display, truncating long reprs."""
    text = repr(value)
    if len(text) > width:
        return text[: width - 3] + "..."
    return text
