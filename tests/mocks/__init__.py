"""
Mock utilities package for Anonymous Data tests.

Provides recording customizations and deterministic distributions.
"""

from .customization_mocks import (
    BadResultCustomization,
    DecliningCustomization,
    FixedDistribution,
    RaisingCustomization,
    RecordingCustomization,
    create_call_log,
)

__all__ = [
    "BadResultCustomization",
    "DecliningCustomization",
    "FixedDistribution",
    "RaisingCustomization",
    "RecordingCustomization",
    "create_call_log",
]
