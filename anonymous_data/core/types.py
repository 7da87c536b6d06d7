"""
Shared protocol types for structural typing across the engine and its
collaborators.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.distribution import Distribution
    from ..domain.populate_option import PopulateOption
    from .result import ResolutionResult


@dataclass(frozen=True)
class Parameter:
    """A constructor parameter the engine has to supply."""

    name: str
    annotation: Any
    positional_only: bool = False


@dataclass(frozen=True)
class Constructor:
    """A way of building an instance: a callable plus the parameters it needs."""

    function: Callable[..., Any]
    parameters: tuple[Parameter, ...] = ()
    name: str = "__init__"

    def invoke(self, arguments: Sequence[Any]) -> Any:
        """Call the constructor with one resolved argument per parameter."""
        # Keywords wherever allowed; skipped defaulted parameters must not shift positions
        positional = [
            value for param, value in zip(self.parameters, arguments) if param.positional_only
        ]
        keywords = {
            param.name: value
            for param, value in zip(self.parameters, arguments)
            if not param.positional_only
        }
        return self.function(*positional, **keywords)


@dataclass(frozen=True)
class MemberInfo:
    """A populatable attribute or property of a class."""

    name: str
    annotation: Any
    writable: bool = True
    metadata: dict[str, Any] = field(default_factory=dict, compare=False)


@runtime_checkable
class AnonymousDataSource(Protocol):
    """What factories and customizations may ask of the engine.

    Both the engine and a resolution context satisfy this contract, so
    primitive factories work against either.
    """

    def any(self, type_: Any, populate: PopulateOption = ...) -> Any: ...

    def any_double(
        self, minimum: float, maximum: float, distribution: Distribution | None = None
    ) -> float: ...

    def populate(self, instance: Any, deep: bool = False) -> Any: ...


Factory = Callable[[Any], Any]


@runtime_checkable
class Customization(Protocol):
    """A pluggable rule that may claim a resolution request or decline it."""

    def create(self, context: Any) -> ResolutionResult: ...


@runtime_checkable
class TypeCapabilities(Protocol):
    """Minimal type-introspection contract the engine consumes."""

    def unwrap(self, type_: Any, rng: random.Random) -> Any: ...

    def strip_optional(self, type_: Any) -> Any: ...

    def is_primitive(self, type_: Any) -> bool: ...

    def is_enum(self, type_: Any) -> bool: ...

    def enum_values(self, type_: Any) -> list[Any]: ...

    def is_sequence(self, type_: Any) -> bool: ...

    def element_type(self, type_: Any) -> Any: ...

    def is_array(self, type_: Any) -> bool: ...

    def sequence_constructor(self, type_: Any) -> Callable[[Iterable[Any]], Any] | None: ...

    def add_method(self, type_: Any) -> str | None: ...

    def is_abstract(self, type_: Any) -> bool: ...

    def constructors(self, type_: Any) -> list[Constructor]: ...

    def members(self, type_: Any) -> list[MemberInfo]: ...


@runtime_checkable
class SequenceBuilder(Protocol):
    """Produces bounded lazy sequences and materializes them."""

    def any_sequence(self, data: AnonymousDataSource, element_type: Any) -> Iterator[Any]: ...

    def materialize(self, items: Iterable[Any], target_type: Any) -> Any: ...
