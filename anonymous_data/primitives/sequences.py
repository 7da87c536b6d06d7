"""
Sequence generation and materialization.

Builds bounded lazy sequences of anonymous elements and turns them into the
concrete container a type annotation asks for.
"""

import collections
import collections.abc as cabc
from collections.abc import Callable, Iterable, Iterator
from typing import Any, get_origin

from ..core.types import AnonymousDataSource
from ..utilities.constants import (
    DEFAULT_MAX_SEQUENCE_LENGTH,
    DEFAULT_MIN_SEQUENCE_LENGTH,
    ValidationError,
)
from ..utilities.validators import validate_non_negative_int
from .factory import any_int


def _iterator(items: Iterable[Any]) -> Iterator[Any]:
    return iter(list(items))


_MATERIALIZERS: dict[Any, Callable[[Iterable[Any]], Any]] = {
    list: list,
    tuple: tuple,
    set: set,
    frozenset: frozenset,
    dict: dict,
    collections.deque: collections.deque,
    cabc.Iterable: list,
    cabc.Collection: list,
    cabc.Sequence: list,
    cabc.MutableSequence: list,
    cabc.Reversible: list,
    cabc.Set: set,
    cabc.MutableSet: set,
    cabc.Mapping: dict,
    cabc.MutableMapping: dict,
    cabc.Iterator: _iterator,
    cabc.Generator: _iterator,
}


class DefaultSequenceBuilder:
    """
    Sequence builder producing between ``min_length`` and ``max_length``
    elements (inclusive).
    """

    def __init__(
        self,
        min_length: int = DEFAULT_MIN_SEQUENCE_LENGTH,
        max_length: int = DEFAULT_MAX_SEQUENCE_LENGTH,
    ) -> None:
        validate_non_negative_int(min_length, "min_length")
        validate_non_negative_int(max_length, "max_length")
        if max_length < min_length:
            raise ValidationError(
                f"max_length ({max_length}) must not be less than min_length ({min_length})"
            )
        self.min_length = min_length
        self.max_length = max_length

    def any_sequence(self, data: AnonymousDataSource, element_type: Any) -> Iterator[Any]:
        """
        Create a lazy sequence of anonymous elements.

        The length is drawn immediately; each element is created when the
        iterator reaches it.
        """
        length = any_int(data, self.min_length, self.max_length)
        return (data.any(element_type) for _ in range(length))

    def materialize(self, items: Iterable[Any], target_type: Any) -> Any:
        """Build the container named by ``target_type`` from ``items``."""
        origin = get_origin(target_type) or target_type
        materializer = _MATERIALIZERS.get(origin)
        if materializer is not None:
            return materializer(items)
        if getattr(origin, "__module__", None) == "collections.abc":
            return list(items)
        return origin(items)
