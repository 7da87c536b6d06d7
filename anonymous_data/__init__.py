"""
Anonymous Data - anonymous value synthesis for automated test fixtures.

This package provides:
- An engine that builds fully-formed instances of arbitrary types
- Type-level and member-level factory registration
- A customization chain for overriding how types are resolved
- Shallow and deep population of existing instances
- Seeded, reproducible randomness

Example:
    data = AnonymousData()
    order = data.any(Order, PopulateOption.DEEP)
"""

__version__ = "1.0.0"
__author__ = "Anonymous Data Developers"
__description__ = "Anonymous value synthesis for automated test fixtures"

from .config import EngineSettings
from .core.context import ResolutionContext
from .core.engine import AnonymousData
from .core.result import ResolutionResult
from .core.types import AnonymousDataSource, Customization, SequenceBuilder, TypeCapabilities
from .customizations import FactoryCustomization, ImplementationCustomization
from .domain import UNIFORM, Distribution, Member, PopulateOption, UniformDistribution
from .introspection import PythonTypeCapabilities, constructor, hidden_constructor
from .utilities.constants import DEFAULT_SEED, AnonymousDataError, ValidationError

__all__ = [
    "DEFAULT_SEED",
    "UNIFORM",
    "AnonymousData",
    "AnonymousDataError",
    "AnonymousDataSource",
    "Customization",
    "Distribution",
    "EngineSettings",
    "FactoryCustomization",
    "ImplementationCustomization",
    "Member",
    "PopulateOption",
    "PythonTypeCapabilities",
    "ResolutionContext",
    "ResolutionResult",
    "SequenceBuilder",
    "TypeCapabilities",
    "UniformDistribution",
    "ValidationError",
    "constructor",
    "hidden_constructor",
]
