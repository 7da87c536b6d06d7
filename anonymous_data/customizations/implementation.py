"""
Customization mapping an interface or abstract class onto an implementation.
"""

import logging
from typing import Any

from ..core.result import ResolutionResult
from ..utilities.constants import ValidationError
from ..utilities.formatters import format_type
from ..utilities.validators import validate_not_none

logger = logging.getLogger(__name__)


class ImplementationCustomization:
    """
    Resolves ``abstract`` by creating ``implementation`` instead.

    Any other requested type is declined so the next customization (or the
    structural fallback) can handle it.
    """

    def __init__(self, abstract: Any, implementation: Any) -> None:
        validate_not_none(abstract, "abstract")
        validate_not_none(implementation, "implementation")
        if abstract is implementation:
            raise ValidationError(f"{format_type(abstract)} cannot be its own implementation")

        self.abstract = abstract
        self.implementation = implementation

    def create(self, context: Any) -> ResolutionResult:
        """Create the implementation when the abstract type is requested."""
        if context.result_type != self.abstract:
            return ResolutionResult.declined()

        logger.debug(
            f"Resolving {format_type(self.abstract)} as {format_type(self.implementation)}"
        )
        return ResolutionResult.success(context.any(self.implementation))

    def __repr__(self) -> str:
        return (
            f"ImplementationCustomization({format_type(self.abstract)} -> "
            f"{format_type(self.implementation)})"
        )
