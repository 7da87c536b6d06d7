"""
Utilities package for Anonymous Data.

Provides constants, exception types, argument validators, and display
formatters shared across the engine and the CLI.
"""

from .constants import DEFAULT_SEED, AnonymousDataError, ValidationError
from .formatters import format_member, format_type, format_value
from .validators import validate_in_range, validate_not_none

__all__ = [
    "DEFAULT_SEED",
    "AnonymousDataError",
    "ValidationError",
    "format_member",
    "format_type",
    "format_value",
    "validate_in_range",
    "validate_not_none",
]
