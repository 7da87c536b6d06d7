"""
Domain value objects for Anonymous Data.
"""

from .distribution import UNIFORM, Distribution, UniformDistribution
from .member import Member
from .populate_option import PopulateOption

__all__ = [
    "UNIFORM",
    "Distribution",
    "Member",
    "PopulateOption",
    "UniformDistribution",
]
