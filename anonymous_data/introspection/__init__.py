"""
Type introspection for Anonymous Data.

Provides the default TypeCapabilities implementation and the decorators
classes use to expose alternate constructors.
"""

from .capabilities import PRIMITIVE_TYPES, PythonTypeCapabilities
from .markers import constructor, hidden_constructor

__all__ = [
    "PRIMITIVE_TYPES",
    "PythonTypeCapabilities",
    "constructor",
    "hidden_constructor",
]
