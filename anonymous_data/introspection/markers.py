"""
Decorators that let a class describe how it may be constructed.

Python classes have a single ``__init__``; alternate constructors are
classmethods, which the engine only considers when they are marked.
"""

from collections.abc import Callable
from typing import Any

CONSTRUCTOR_MARKER = "__anonymous_data_constructor__"
HIDDEN_MARKER = "__anonymous_data_hidden__"


def _underlying(func: Any) -> Callable[..., Any]:
    if isinstance(func, (classmethod, staticmethod)):
        return func.__func__
    return func


def constructor(func: Any) -> Any:
    """
    Mark a classmethod or staticmethod as an alternate public constructor.

    Example:
        class Point:
            def __init__(self, x: int, y: int, z: int) -> None: ...

            @constructor
            @classmethod
            def origin(cls) -> "Point":
                return cls(0, 0, 0)
    """
    setattr(_underlying(func), CONSTRUCTOR_MARKER, True)
    return func


def hidden_constructor(func: Any) -> Any:
    """Mark ``__init__`` as not public, so the engine will not call it."""
    setattr(_underlying(func), HIDDEN_MARKER, True)
    return func


def is_marked_constructor(attr: Any) -> bool:
    """Check if a class attribute was decorated with @constructor."""
    return bool(getattr(_underlying(attr), CONSTRUCTOR_MARKER, False))


def is_hidden(attr: Any) -> bool:
    """Check if a class attribute was decorated with @hidden_constructor."""
    return bool(getattr(_underlying(attr), HIDDEN_MARKER, False))
