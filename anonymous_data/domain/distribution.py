"""
Distribution algorithms for range sampling.

A distribution turns the engine's random stream into a value in [0, 1);
AnonymousData.any_double scales that value onto the requested range.
"""

import random
from abc import ABC, abstractmethod


class Distribution(ABC):
    """Base class for distribution algorithms."""

    @abstractmethod
    def next_double(self, rng: random.Random) -> float:
        """Return a value in [0, 1) drawn from ``rng``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class UniformDistribution(Distribution):
    """Every value in [0, 1) is equally likely."""

    def next_double(self, rng: random.Random) -> float:
        return rng.random()


UNIFORM = UniformDistribution()
