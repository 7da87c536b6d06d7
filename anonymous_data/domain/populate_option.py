"""
Population option for generated values.
"""

from enum import Enum


class PopulateOption(Enum):
    """How far to populate an instance after it has been created."""

    NONE = "none"
    SHALLOW = "shallow"
    DEEP = "deep"

    def is_deep(self) -> bool:
        """Check if the whole reachable object graph should be populated."""
        return self == PopulateOption.DEEP

    @classmethod
    def from_deep(cls, deep: bool) -> "PopulateOption":
        """Map the boolean ``deep`` flag onto an option."""
        return cls.DEEP if deep else cls.SHALLOW
