"""
Test fixtures package for Anonymous Data.

Provides the sample types the engine is exercised against.
"""

from .models import (
    Address,
    Archive,
    Bag,
    Basket,
    Batch,
    Book,
    Branch,
    Catalog,
    Circle,
    Color,
    Coordinates,
    Customer,
    Drawing,
    Empty,
    Fragile,
    Gadget,
    InMemoryRepository,
    Library,
    Names,
    Priority,
    Profile,
    Repository,
    Sealed,
    Service,
    Shape,
    Shelf,
    Square,
    Tag,
    Thermostat,
    Tree,
    Twins,
    Unbuildable,
    Widget,
)

__all__ = [
    "Address",
    "Archive",
    "Bag",
    "Basket",
    "Batch",
    "Book",
    "Branch",
    "Catalog",
    "Circle",
    "Color",
    "Coordinates",
    "Customer",
    "Drawing",
    "Empty",
    "Fragile",
    "Gadget",
    "InMemoryRepository",
    "Library",
    "Names",
    "Priority",
    "Profile",
    "Repository",
    "Sealed",
    "Service",
    "Shape",
    "Shelf",
    "Square",
    "Tag",
    "Thermostat",
    "Tree",
    "Twins",
    "Unbuildable",
    "Widget",
]
