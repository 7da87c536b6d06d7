"""
Argument validation utilities.

Validation failures raise ValidationError immediately and are never wrapped
as construction failures.
"""

from typing import Any

from .constants import ValidationError


def validate_not_none(value: Any, name: str) -> None:
    """Validate that an argument was supplied."""
    if value is None:
        raise ValidationError(f"{name} cannot be None")


def validate_in_range(
    value: float, minimum: float, maximum: float, name: str, message: str | None = None
) -> None:
    """Validate that minimum <= value <= maximum."""
    # NaN compares false both ways and must not slip through
    if not minimum <= value <= maximum:
        raise ValidationError(
            message or f"{name} must be between {minimum} and {maximum}, got {value}"
        )


def validate_non_negative_int(value: int, name: str) -> None:
    """Validate that a number is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")


def validate_callable(value: Any, name: str) -> None:
    """Validate that an argument can be called."""
    validate_not_none(value, name)
    if not callable(value):
        raise ValidationError(f"{name} must be callable, got {type(value).__name__}")
