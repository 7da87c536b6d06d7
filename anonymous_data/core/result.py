"""
Resolution result type.

Customizations and the structural fallback report "produced a value" or
"declined" through this type; only the engine's public boundary turns a
decline into an exception.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of a single attempt to produce a value."""

    succeeded: bool
    value: Any = None
    reason: str | None = None

    def __bool__(self) -> bool:
        """A result is truthy when it carries a value."""
        return self.succeeded

    def get_value(self) -> Any:
        """
        Get the produced value.

        Raises:
            LookupError: If the attempt was declined
        """
        if not self.succeeded:
            raise LookupError(self.reason or "No value was produced")
        return self.value

    @classmethod
    def success(cls, value: Any) -> "ResolutionResult":
        """Create a successful result carrying ``value``."""
        return cls(succeeded=True, value=value)

    @classmethod
    def declined(cls, reason: str | None = None) -> "ResolutionResult":
        """Create a result signalling that no value was produced."""
        return cls(succeeded=False, reason=reason)

    def __str__(self) -> str:
        if self.succeeded:
            return f"SUCCESS: {self.value!r}"
        return f"DECLINED: {self.reason or 'no reason given'}"
