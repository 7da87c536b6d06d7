"""
Per-request resolution context handed to customizations.
"""

from typing import TYPE_CHECKING, Any

from ..domain.distribution import Distribution
from ..domain.populate_option import PopulateOption
from ..utilities.constants import MAX_DOUBLE, ValidationError
from ..utilities.validators import validate_in_range, validate_not_none
from .result import ResolutionResult

if TYPE_CHECKING:
    from .engine import AnonymousData


class ResolutionContext:
    """
    State for resolving one requested type.

    The number of customizations is captured when the context is created,
    so a customization registered while this request is in flight is never
    consulted by it. Nested requests made through ``any`` get a fresh
    context (and a fresh snapshot) from the engine.
    """

    def __init__(self, engine: "AnonymousData", result_type: Any) -> None:
        validate_not_none(engine, "engine")
        validate_not_none(result_type, "result_type")

        self.engine = engine
        self.result_type = result_type
        self._cursor = engine.customization_count

    @property
    def remaining(self) -> int:
        """Number of customizations not yet consulted by this context."""
        return self._cursor

    def any(self, type_: Any, populate: PopulateOption = PopulateOption.NONE) -> Any:
        """Create an anonymous value of a nested type."""
        validate_not_none(type_, "type_")
        return self.engine.any(type_, populate)

    def any_double(
        self, minimum: float, maximum: float, distribution: Distribution | None = None
    ) -> float:
        """Create a random float in [minimum, maximum)."""
        validate_in_range(
            maximum,
            minimum,
            MAX_DOUBLE,
            "maximum",
            "The maximum value must be greater than the minimum value.",
        )
        return self.engine.any_double(minimum, maximum, distribution)

    def populate(self, instance: Any, deep: bool = False) -> Any:
        """Populate an instance's members with anonymous values."""
        return self.engine.populate(instance, deep)

    def call_next_customization(self) -> ResolutionResult:
        """
        Ask the next older customization to resolve the requested type.

        Customizations are consulted newest first; the first one to succeed
        wins. Once every customization has declined, the engine's structural
        fallback is used.

        Raises:
            ValidationError: If a customization returns something other than
                a ResolutionResult
        """
        while self._cursor > 0:
            self._cursor -= 1
            customization = self.engine.customization_at(self._cursor)
            result = customization.create(self)
            if not isinstance(result, ResolutionResult):
                raise ValidationError(
                    f"{type(customization).__name__}.create() must return a ResolutionResult, "
                    f"got {type(result).__name__}"
                )
            if result.succeeded:
                return result

        return self.engine.resolve_structurally(self.result_type)
