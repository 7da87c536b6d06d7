"""
Customization claiming a family of types selected by a predicate.
"""

from collections.abc import Callable
from typing import Any, get_origin

from ..core.result import ResolutionResult
from ..utilities.validators import validate_callable


class FactoryCustomization:
    """
    Creates values for every requested type accepted by ``predicate``.

    The factory receives the resolution context, so it can request nested
    values, and the requested type.

    Example:
        data.customize(
            FactoryCustomization(
                lambda t: isinstance(t, type) and issubclass(t, Shape),
                lambda context, t: t.unit(),
            )
        )
    """

    def __init__(
        self,
        predicate: Callable[[Any], bool],
        factory: Callable[[Any, Any], Any],
    ) -> None:
        validate_callable(predicate, "predicate")
        validate_callable(factory, "factory")

        self.predicate = predicate
        self.factory = factory

    def create(self, context: Any) -> ResolutionResult:
        """Create a value when the predicate accepts the requested type."""
        if not self.predicate(context.result_type):
            return ResolutionResult.declined()
        return ResolutionResult.success(self.factory(context, context.result_type))

    @classmethod
    def for_subclasses(
        cls, base: type, factory: Callable[[Any, Any], Any]
    ) -> "FactoryCustomization":
        """Claim ``base`` and every class derived from it."""
        return cls(
            lambda t: isinstance(t, type) and get_origin(t) is None and issubclass(t, base),
            factory,
        )
