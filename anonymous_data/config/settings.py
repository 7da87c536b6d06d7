"""
Engine settings for Anonymous Data.

Replaces scattered magic numbers with a single validated settings object.
"""

import os
from dataclasses import dataclass

from ..utilities.constants import (
    DEFAULT_MAX_SEQUENCE_LENGTH,
    DEFAULT_MIN_SEQUENCE_LENGTH,
    DEFAULT_SEED,
    DEFAULT_STRING_LENGTH,
    ENV_MAX_ITEMS,
    ENV_MIN_ITEMS,
    ENV_SEED,
    ValidationError,
)
from ..utilities.validators import validate_non_negative_int


@dataclass(frozen=True)
class EngineSettings:
    """
    Immutable engine settings.

    The default instance never consults the environment, so an engine built
    without arguments produces the same values on every run.
    """

    seed: int = DEFAULT_SEED
    min_sequence_length: int = DEFAULT_MIN_SEQUENCE_LENGTH
    max_sequence_length: int = DEFAULT_MAX_SEQUENCE_LENGTH
    string_length: int = DEFAULT_STRING_LENGTH

    def __post_init__(self):
        """Validate settings after initialization."""
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise ValidationError(f"seed must be an integer, got {type(self.seed).__name__}")

        validate_non_negative_int(self.min_sequence_length, "min_sequence_length")
        validate_non_negative_int(self.max_sequence_length, "max_sequence_length")
        validate_non_negative_int(self.string_length, "string_length")

        if self.max_sequence_length < self.min_sequence_length:
            raise ValidationError(
                f"max_sequence_length ({self.max_sequence_length}) must not be less than "
                f"min_sequence_length ({self.min_sequence_length})"
            )

    def with_seed(self, seed: int) -> "EngineSettings":
        """Return a copy of these settings using a different seed."""
        return EngineSettings(
            seed=seed,
            min_sequence_length=self.min_sequence_length,
            max_sequence_length=self.max_sequence_length,
            string_length=self.string_length,
        )

    @classmethod
    def from_environment(cls, environ: dict[str, str] | None = None) -> "EngineSettings":
        """
        Create settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ValidationError: If a variable is set but not an integer
        """
        environ = os.environ if environ is None else environ

        def read_int(name: str, default: int) -> int:
            raw = environ.get(name)
            if raw is None or not raw.strip():
                return default
            try:
                return int(raw, 0)
            except ValueError as e:
                raise ValidationError(f"{name} must be an integer, got {raw!r}") from e

        return cls(
            seed=read_int(ENV_SEED, DEFAULT_SEED),
            min_sequence_length=read_int(ENV_MIN_ITEMS, DEFAULT_MIN_SEQUENCE_LENGTH),
            max_sequence_length=read_int(ENV_MAX_ITEMS, DEFAULT_MAX_SEQUENCE_LENGTH),
        )


_default_settings = EngineSettings()


def get_default_settings() -> EngineSettings:
    """Get the shared default settings."""
    return _default_settings
