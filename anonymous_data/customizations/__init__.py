"""
Built-in customizations for Anonymous Data.

Each customization claims some requested types and declines the rest,
yielding to older customizations and finally the structural fallback.
"""

from .factory import FactoryCustomization
from .implementation import ImplementationCustomization

__all__ = ["FactoryCustomization", "ImplementationCustomization"]
