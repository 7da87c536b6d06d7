"""
Configuration management for Anonymous Data.

This package provides the validated settings object used to build engines,
replacing scattered constants with a single configuration type.
"""

from .settings import EngineSettings, get_default_settings

__all__ = ["EngineSettings", "get_default_settings"]
