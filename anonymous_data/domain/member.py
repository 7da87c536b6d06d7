"""
Member value object for member-level factory registration.

Identifies a single attribute or property of a concrete class.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """
    Immutable member descriptor: the owning class plus the attribute name.

    Used as a registry key, so equality is exact: a member registered on a
    base class does not match the same attribute reached through a subclass.
    """

    owner: type
    name: str

    def __post_init__(self):
        """Validate member after initialization."""
        if not isinstance(self.owner, type):
            raise TypeError(f"Member owner must be a class, got: {type(self.owner)}")

        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Member name cannot be empty")

    def __str__(self) -> str:
        """String representation."""
        return f"{self.owner.__qualname__}.{self.name}"
