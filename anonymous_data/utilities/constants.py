"""
Shared constants and exception types for Anonymous Data.

Centralizes the default seed, sequence bounds, and the two exception types
callers are expected to handle.
"""

import sys
from typing import Any

# Largest finite float; upper bound for sampled ranges
MAX_DOUBLE = sys.float_info.max

# Default seed for the engine's random stream; fixed so runs are reproducible.
DEFAULT_SEED = 0x07357FAC

# Bounds for generated sequences (inclusive)
DEFAULT_MIN_SEQUENCE_LENGTH = 1
DEFAULT_MAX_SEQUENCE_LENGTH = 5

# Length of generated strings
DEFAULT_STRING_LENGTH = 12
STRING_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

# Environment variables read by EngineSettings.from_environment()
ENV_SEED = "ANONYMOUS_DATA_SEED"
ENV_MIN_ITEMS = "ANONYMOUS_DATA_MIN_ITEMS"
ENV_MAX_ITEMS = "ANONYMOUS_DATA_MAX_ITEMS"


class ValidationError(ValueError):
    """Raised when an argument is invalid (e.g. a maximum below its minimum)."""


class AnonymousDataError(Exception):
    """
    Raised when an anonymous value could not be created or populated.

    Carries the offending type (or member) and, where one exists, the
    underlying exception that caused the failure.
    """

    def __init__(
        self, target: Any, cause: BaseException | None = None, reason: str | None = None
    ) -> None:
        self.target = target
        self.cause = cause
        self.reason = reason
        super().__init__(self._build_message(target, cause, reason))

    @staticmethod
    def _build_message(target: Any, cause: BaseException | None, reason: str | None) -> str:
        from ..domain.member import Member
        from .formatters import format_member, format_type

        if isinstance(target, Member):
            message = f"Could not populate member {format_member(target)}"
        else:
            message = f"Could not create an anonymous value of type {format_type(target)}"

        if cause is not None:
            message += f": {type(cause).__name__}: {cause}"
        elif reason:
            message += f" ({reason})"
        return message
