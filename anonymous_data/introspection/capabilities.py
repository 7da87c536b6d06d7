"""
Type introspection over Python's runtime type metadata.

Implements the TypeCapabilities contract on top of ``typing``, ``inspect``,
``dataclasses`` and ``enum`` so the engine never touches those modules
directly.
"""

import collections
import collections.abc as cabc
import dataclasses
import enum
import inspect
import logging
import random
import types
import typing
from collections.abc import Callable, Iterable
from typing import Annotated, Any, ClassVar, Literal, TypeVar, Union, get_args, get_origin

from ..core.types import Constructor, MemberInfo, Parameter
from .markers import is_hidden, is_marked_constructor

logger = logging.getLogger(__name__)

PRIMITIVE_TYPES = (bool, int, float, complex)

# Text and binary types iterate but are scalars for generation purposes
_NON_SEQUENCE_TYPES = (str, bytes, bytearray, memoryview)

# Concrete containers materialized directly by the sequence builder
_ARRAY_TYPES = (list, tuple, set, frozenset, dict, collections.deque)

_MAPPING_TYPES = (dict, cabc.Mapping)

_ADD_METHOD_NAMES = ("append", "add")


def _origin(type_: Any) -> Any:
    return get_origin(type_) or type_


def _safe_type_hints(obj: Any) -> dict[str, Any]:
    """Resolve annotations, returning an empty mapping for unresolvable ones."""
    try:
        return typing.get_type_hints(obj)
    except (NameError, TypeError, AttributeError) as e:
        logger.debug(f"Could not resolve type hints for {obj!r}: {e}")
        return {}


def _is_union(type_: Any) -> bool:
    return get_origin(type_) is Union or isinstance(type_, types.UnionType)


def _typevar_bindings(type_: Any) -> dict[Any, Any]:
    """Map a parameterised generic class's TypeVars onto its arguments."""
    origin = get_origin(type_)
    args = get_args(type_)
    parameters = getattr(origin, "__parameters__", ()) if origin is not None else ()
    if not args or len(parameters) != len(args):
        return {}
    return dict(zip(parameters, args))


def _substitute(annotation: Any, bindings: dict[Any, Any]) -> Any:
    if isinstance(annotation, TypeVar):
        return bindings.get(annotation, annotation)
    return annotation


class PythonTypeCapabilities:
    """
    TypeCapabilities implementation backed by runtime type metadata.

    Supported type descriptors: classes, parameterised builtin and
    ``collections.abc`` generics, ``Optional``/``Union``, ``Literal``,
    ``Annotated`` and ``NewType``.
    """

    def unwrap(self, type_: Any, rng: random.Random) -> Any:
        """
        Strip wrappers that do not change what has to be built.

        Annotated and NewType yield their underlying type, Optional[T]
        yields T, and a Union yields one member chosen uniformly.
        """
        while True:
            if get_origin(type_) is Annotated:
                type_ = get_args(type_)[0]
            elif hasattr(type_, "__supertype__"):
                type_ = type_.__supertype__
            elif _is_union(type_):
                choices = [arg for arg in get_args(type_) if arg is not type(None)]
                if not choices:
                    return type_
                type_ = choices[0] if len(choices) == 1 else rng.choice(choices)
            else:
                return type_

    def strip_optional(self, type_: Any) -> Any:
        """Remove None from a Union, leaving the type a nullable member declares."""
        if not _is_union(type_):
            return type_
        choices = tuple(arg for arg in get_args(type_) if arg is not type(None))
        if not choices or len(choices) == len(get_args(type_)):
            return type_
        return choices[0] if len(choices) == 1 else Union[choices]

    def is_primitive(self, type_: Any) -> bool:
        """Check if a type is a scalar value type (bool, int, float, complex)."""
        return type_ in PRIMITIVE_TYPES

    def is_enum(self, type_: Any) -> bool:
        """Check if a type enumerates a fixed set of values (Enum or Literal)."""
        origin = get_origin(type_)
        if origin is Literal:
            return True
        return origin is None and isinstance(type_, type) and issubclass(type_, enum.Enum)

    def enum_values(self, type_: Any) -> list[Any]:
        """Get the declared values of an Enum or Literal type."""
        if get_origin(type_) is Literal:
            return list(get_args(type_))
        return list(type_)

    def element_type(self, type_: Any) -> Any:
        """
        Get the element type of a sequence type, or None when it has none.

        Mappings produce (key, value) tuples.
        """
        origin = _origin(type_)
        if not isinstance(origin, type) or issubclass(origin, _NON_SEQUENCE_TYPES):
            return None

        if not issubclass(origin, cabc.Iterable):
            return None

        args = get_args(type_)
        if args:
            if issubclass(origin, _MAPPING_TYPES):
                return tuple[args[0], args[1]] if len(args) == 2 else None
            if origin is tuple:
                return args[0] if len(args) == 2 and args[1] is Ellipsis else None
            return args[0]

        inherited = self._inherited_element_type(origin)
        if inherited is not None:
            return inherited

        method_name = self.add_method(origin)
        if method_name is not None:
            return self._add_parameter_type(origin, method_name)
        return None

    def is_sequence(self, type_: Any) -> bool:
        """Check if values of this type are built from a sequence of elements."""
        return self.element_type(type_) is not None

    def is_array(self, type_: Any) -> bool:
        """Check if the sequence builder can materialize this type directly."""
        origin = _origin(type_)
        if not isinstance(origin, type):
            return False
        if origin in _ARRAY_TYPES:
            return True
        return origin.__module__ == "collections.abc"

    def sequence_constructor(self, type_: Any) -> Callable[[Iterable[Any]], Any] | None:
        """Get a callable that builds the type from an iterable of its elements."""
        origin = _origin(type_)
        if not isinstance(origin, type) or inspect.isabstract(origin):
            return None

        # Subclasses of builtin containers that keep the builtin initializer
        for base in _ARRAY_TYPES:
            if issubclass(origin, base) and origin.__init__ is base.__init__:
                return origin

        try:
            signature = inspect.signature(origin)
        except (TypeError, ValueError):
            return None

        required = [
            p
            for p in signature.parameters.values()
            if p.default is inspect.Parameter.empty
            and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        ]
        if len(required) != 1:
            return None

        hints = _safe_type_hints(origin.__init__)
        annotation = hints.get(required[0].name)
        annotation_origin = _origin(annotation) if annotation is not None else None
        if (
            isinstance(annotation_origin, type)
            and issubclass(annotation_origin, cabc.Iterable)
            and not issubclass(annotation_origin, _NON_SEQUENCE_TYPES)
        ):
            return origin
        return None

    def add_method(self, type_: Any) -> str | None:
        """Get the name of the method that appends one element, if any."""
        origin = _origin(type_)
        if not isinstance(origin, type) or issubclass(origin, _NON_SEQUENCE_TYPES):
            return None
        for name in _ADD_METHOD_NAMES:
            if callable(getattr(origin, name, None)):
                return name
        return None

    def is_abstract(self, type_: Any) -> bool:
        """Check if a type is an interface (Protocol) or abstract class."""
        origin = _origin(type_)
        if not isinstance(origin, type):
            return False
        return inspect.isabstract(origin) or bool(getattr(origin, "_is_protocol", False))

    def constructors(self, type_: Any) -> list[Constructor]:
        """
        List the public constructors of a type in declaration order.

        ``__init__`` comes first unless hidden, followed by classmethods
        marked with @constructor.
        """
        origin = _origin(type_)
        args = get_args(type_)

        if origin is tuple and args and Ellipsis not in args:
            parameters = tuple(
                Parameter(f"item{index}", arg, positional_only=True)
                for index, arg in enumerate(args)
            )
            fixed = Constructor(
                function=lambda *items: tuple(items), parameters=parameters, name="tuple"
            )
            return [fixed]

        if not isinstance(origin, type):
            return []

        if origin in _ARRAY_TYPES and not args:
            return [Constructor(function=origin, name=origin.__name__)]

        bindings = _typevar_bindings(type_)
        result: list[Constructor] = []

        if not is_hidden(inspect.getattr_static(origin, "__init__", None)):
            class_hints = _safe_type_hints(origin)
            init_hints = _safe_type_hints(origin.__init__)
            ctor = self._build_constructor(
                origin, "__init__", {**class_hints, **init_hints}, bindings
            )
            if ctor is not None:
                result.append(ctor)

        seen: set[str] = set()
        for klass in origin.__mro__:
            for name, attr in vars(klass).items():
                if name in seen or name.startswith("_") or not is_marked_constructor(attr):
                    continue
                seen.add(name)
                bound = getattr(origin, name)
                ctor = self._build_constructor(bound, name, _safe_type_hints(bound), bindings)
                if ctor is not None:
                    result.append(ctor)

        return result

    def members(self, type_: Any) -> list[MemberInfo]:
        """
        List the annotated attributes and properties of a class.

        Builtins, enums and containers expose no members.
        """
        origin = _origin(type_)
        if (
            not isinstance(origin, type)
            or origin.__module__ == "builtins"
            or issubclass(origin, enum.Enum)
            or self.is_sequence(origin)
        ):
            return []

        params = getattr(origin, "__dataclass_params__", None)
        frozen = bool(params is not None and params.frozen)

        result: list[MemberInfo] = []
        seen: set[str] = set()

        for name, annotation in _safe_type_hints(origin).items():
            if name.startswith("_") or get_origin(annotation) is ClassVar:
                continue
            if isinstance(annotation, (TypeVar, dataclasses.InitVar)):
                continue
            static = inspect.getattr_static(origin, name, None)
            if isinstance(static, property) or callable(static):
                continue
            seen.add(name)
            result.append(MemberInfo(name=name, annotation=annotation, writable=not frozen))

        for klass in origin.__mro__:
            for name, attr in vars(klass).items():
                if name in seen or name.startswith("_") or not isinstance(attr, property):
                    continue
                seen.add(name)
                annotation = self._property_type(attr)
                if annotation is None:
                    continue
                result.append(
                    MemberInfo(name=name, annotation=annotation, writable=attr.fset is not None)
                )

        return result

    def _build_constructor(
        self,
        function: Callable[..., Any],
        name: str,
        hints: dict[str, Any],
        bindings: dict[Any, Any],
    ) -> Constructor | None:
        try:
            signature = inspect.signature(function)
        except (TypeError, ValueError):
            return None

        parameters: list[Parameter] = []
        skipped_positional = False
        for param in signature.parameters.values():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            positional_only = param.kind is inspect.Parameter.POSITIONAL_ONLY
            annotation = hints.get(param.name, param.annotation)
            if annotation is inspect.Parameter.empty or isinstance(annotation, str):
                if param.default is not inspect.Parameter.empty:
                    skipped_positional = skipped_positional or positional_only
                    continue
                logger.debug(f"Constructor {name} of {function!r} has unannotated '{param.name}'")
                return None

            # A positional argument after a skipped one would land in the wrong slot
            if positional_only and skipped_positional:
                return None

            parameters.append(
                Parameter(
                    name=param.name,
                    annotation=_substitute(annotation, bindings),
                    positional_only=positional_only,
                )
            )

        return Constructor(function=function, parameters=tuple(parameters), name=name)

    def _inherited_element_type(self, origin: type) -> Any:
        """Find the element type of a class deriving from e.g. list[int]."""
        for klass in origin.__mro__:
            for base in getattr(klass, "__orig_bases__", ()):
                base_origin = get_origin(base)
                if (
                    isinstance(base_origin, type)
                    and issubclass(base_origin, cabc.Iterable)
                    and get_args(base)
                ):
                    return self.element_type(base)
        return None

    def _add_parameter_type(self, origin: type, method_name: str) -> Any:
        method = getattr(origin, method_name)
        hints = _safe_type_hints(method)
        hints.pop("return", None)
        try:
            parameter_names = [
                p.name
                for p in inspect.signature(method).parameters.values()
                if p.name != "self"
            ]
        except (TypeError, ValueError):
            return None
        if len(parameter_names) != 1:
            return None
        return hints.get(parameter_names[0])

    def _property_type(self, prop: property) -> Any:
        if prop.fget is not None:
            annotation = _safe_type_hints(prop.fget).get("return")
            if annotation is not None:
                return annotation
        if prop.fset is not None:
            hints = _safe_type_hints(prop.fset)
            hints.pop("return", None)
            if len(hints) == 1:
                return next(iter(hints.values()))
        return None
