"""
Anonymous value engine.

Resolves a requested type to a fully-formed instance by consulting, in
order: registered factories, the customization chain (newest first), and
the structural fallback (enum pick, sequence build, constructor synthesis).
"""

import logging
import random
from typing import Any

from ..config.settings import EngineSettings, get_default_settings
from ..domain.distribution import UNIFORM, Distribution
from ..domain.member import Member
from ..domain.populate_option import PopulateOption
from ..introspection.capabilities import PythonTypeCapabilities
from ..primitives.factory import PrimitiveFactory
from ..primitives.sequences import DefaultSequenceBuilder
from ..utilities.constants import MAX_DOUBLE, AnonymousDataError, ValidationError
from ..utilities.formatters import format_type
from ..utilities.validators import validate_callable, validate_in_range, validate_not_none
from .context import ResolutionContext
from .populator import Populator
from .result import ResolutionResult
from .types import (
    AnonymousDataSource,
    Customization,
    Factory,
    SequenceBuilder,
    TypeCapabilities,
)

logger = logging.getLogger(__name__)


class AnonymousData:
    """
    Creates anonymous values for use in unit tests.

    All randomness comes from a single ``random.Random`` seeded at
    construction, so two engines with the same seed that receive the same
    sequence of requests produce the same values.

    The engine is meant for single-threaded use. Register factories and
    customizations before the first request; resolving from several threads
    is only safe once registration has stopped, and even then the values
    depend on the order in which the threads reach the random stream.
    """

    def __init__(
        self,
        seed: int | None = None,
        *,
        settings: EngineSettings | None = None,
        capabilities: TypeCapabilities | None = None,
        sequences: SequenceBuilder | None = None,
        primitives: PrimitiveFactory | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            seed: Seed for the random stream (overrides ``settings.seed``)
            settings: Engine settings, defaults to the shared default settings
            capabilities: Type introspection, defaults to PythonTypeCapabilities
            sequences: Sequence builder, defaults to DefaultSequenceBuilder
            primitives: Scalar factories registered before anything else
        """
        settings = settings or get_default_settings()
        if seed is not None:
            settings = settings.with_seed(seed)

        self.settings = settings
        self.random = random.Random(settings.seed)
        self.capabilities: TypeCapabilities = capabilities or PythonTypeCapabilities()
        self.sequences: SequenceBuilder = sequences or DefaultSequenceBuilder(
            settings.min_sequence_length, settings.max_sequence_length
        )

        self._customizations: list[Customization] = []
        self._factories: dict[Any, Factory] = {}
        self._member_factories: dict[Member, Factory] = {}
        self._populator = Populator(self)

        (primitives or PrimitiveFactory(settings.string_length)).register_with(self)

        logger.info(f"Anonymous data engine initialized (seed={settings.seed:#x})")

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def any(self, type_: Any, populate: PopulateOption = PopulateOption.NONE) -> Any:
        """
        Create an anonymous value of the specified type.

        Args:
            type_: The type to create (a class or a typing construct)
            populate: Whether to populate the created value's members

        Returns:
            An instance of the specified type

        Raises:
            AnonymousDataError: The specified type could not be created
        """
        validate_not_none(type_, "type_")

        if type_ is AnonymousData or type_ is AnonymousDataSource:
            return self

        factory = self._type_factory(type_)
        if factory is not None:
            logger.debug(f"Using registered factory for {format_type(type_)}")
            try:
                value = factory(self)
                self._populator.populate(value, populate)
            except Exception as e:
                raise AnonymousDataError(type_, e) from e
            return value

        context = ResolutionContext(self, type_)
        try:
            result = context.call_next_customization()
            if result.succeeded:
                return self._populator.populate(result.value, populate)
        except Exception as e:
            raise AnonymousDataError(type_, e) from e

        logger.debug(f"Could not resolve {format_type(type_)}: {result.reason}")
        raise AnonymousDataError(type_, reason=result.reason)

    def any_double(
        self, minimum: float, maximum: float, distribution: Distribution | None = None
    ) -> float:
        """
        Create a random float within a range using a distribution algorithm.

        Args:
            minimum: The minimum value (inclusive)
            maximum: The maximum value (exclusive unless equal to minimum)
            distribution: The distribution algorithm, uniform by default

        Raises:
            ValidationError: If maximum is less than minimum
        """
        validate_in_range(
            maximum,
            minimum,
            MAX_DOUBLE,
            "maximum",
            "The maximum value must be greater than the minimum value.",
        )
        sample = (distribution or UNIFORM).next_double(self.random)
        return minimum + sample * (maximum - minimum)

    def populate(self, instance: Any, deep: bool = False) -> Any:
        """
        Populate an instance by assigning its members to anonymous values.

        Args:
            instance: The instance to populate
            deep: Populate the entire reachable object graph, breadth-first.
                Cyclic graphs are not detected and will not terminate.

        Returns:
            The populated instance
        """
        return self._populator.populate(instance, PopulateOption.from_deep(deep))

    def populate_with(self, instance: Any, option: PopulateOption) -> Any:
        """Populate an instance using an explicit PopulateOption."""
        return self._populator.populate(instance, option)

    def resolve_structurally(self, type_: Any) -> ResolutionResult:
        """
        Build a value without factories or customizations.

        Tries, in order: unwrapping (Optional, Annotated, NewType, Union),
        enum values, sequence building, and constructor synthesis. Abstract
        types and types without a usable constructor are declined.
        """
        capabilities = self.capabilities

        unwrapped = capabilities.unwrap(type_, self.random)
        if unwrapped is not type_:
            return ResolutionResult.success(self.any(unwrapped))

        if capabilities.is_enum(type_):
            values = capabilities.enum_values(type_)
            if not values:
                return ResolutionResult.declined(f"{format_type(type_)} declares no values")
            return ResolutionResult.success(self.random.choice(values))

        if capabilities.is_sequence(type_):
            result = self._build_sequence(type_)
            if result.succeeded:
                return result

        if capabilities.is_abstract(type_):
            return ResolutionResult.declined(f"{format_type(type_)} is abstract")

        constructors = capabilities.constructors(type_)
        if not constructors:
            return ResolutionResult.declined(f"{format_type(type_)} has no public constructor")

        # min() keeps the first of equally short constructors (declaration order)
        constructor = min(constructors, key=lambda c: len(c.parameters))
        logger.debug(
            f"Constructing {format_type(type_)} via {constructor.name} "
            f"({len(constructor.parameters)} parameter(s))"
        )
        arguments = [self.any(parameter.annotation) for parameter in constructor.parameters]
        return ResolutionResult.success(constructor.invoke(arguments))

    def _build_sequence(self, type_: Any) -> ResolutionResult:
        capabilities = self.capabilities
        element_type = capabilities.element_type(type_)

        if capabilities.is_array(type_):
            items = self.sequences.any_sequence(self, element_type)
            return ResolutionResult.success(self.sequences.materialize(items, type_))

        build = capabilities.sequence_constructor(type_)
        if build is not None:
            items = list(self.sequences.any_sequence(self, element_type))
            return ResolutionResult.success(build(items))

        method_name = capabilities.add_method(type_)
        empty = next(
            (c for c in capabilities.constructors(type_) if not c.parameters), None
        )
        if method_name is not None and empty is not None:
            instance = empty.invoke([])
            add = getattr(instance, method_name)
            for item in self.sequences.any_sequence(self, element_type):
                add(item)
            return ResolutionResult.success(instance)

        return ResolutionResult.declined(f"{format_type(type_)} cannot be built as a sequence")

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, key: Any, factory: Factory) -> None:
        """
        Register a factory for a type or for a single member.

        A later registration for the same key replaces the earlier one.
        Lookup is by exact key: registering a base class does not affect
        its subclasses.

        Args:
            key: The type the factory creates, or a Member
            factory: Callable receiving the engine and returning the value
        """
        validate_not_none(key, "key")
        validate_callable(factory, "factory")

        if isinstance(key, Member):
            self._member_factories[key] = factory
        else:
            self._factories[key] = factory

    def register_member(self, owner: type, name: str, factory: Factory) -> None:
        """Register a factory for the member ``name`` of ``owner``."""
        self.register(Member(owner, name), factory)

    def customize(self, customization: Customization) -> "AnonymousData":
        """
        Add a customization; later customizations are consulted first.

        Returns:
            The engine, to allow call chaining

        Raises:
            ValidationError: If the customization has no ``create`` method
        """
        validate_not_none(customization, "customization")
        if not isinstance(customization, Customization):
            raise ValidationError(
                f"customization must define create(context), got {type(customization).__name__}"
            )

        self._customizations.append(customization)
        logger.debug(f"Added customization {type(customization).__name__}")
        return self

    @property
    def customization_count(self) -> int:
        """Number of customizations added so far."""
        return len(self._customizations)

    def customization_at(self, index: int) -> Customization:
        """Get the customization at ``index`` (0 is the oldest)."""
        return self._customizations[index]

    def member_factory(self, member: Member) -> Factory | None:
        """Get the factory registered for an exact member, if any."""
        return self._member_factories.get(member)

    def _type_factory(self, type_: Any) -> Factory | None:
        try:
            return self._factories.get(type_)
        except TypeError:
            # Unhashable descriptors (e.g. Annotated with list metadata) cannot be keys
            return None

    def __repr__(self) -> str:
        return (
            f"AnonymousData(seed={self.settings.seed:#x}, "
            f"factories={len(self._factories)}, customizations={len(self._customizations)})"
        )
