"""
Test package for Anonymous Data.

Unit tests cover each component in isolation; property tests use Hypothesis
to check seed determinism and range guarantees across many inputs.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "fixtures",  # Sample types
    "mocks",  # Recording customizations and fixed distributions
    "property",  # Property-based suite
    "unit",  # Unit test suite
]
