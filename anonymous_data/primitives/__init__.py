"""
Scalar and sequence generators used by the engine.
"""

from .factory import (
    PrimitiveFactory,
    any_bool,
    any_bytes,
    any_complex,
    any_date,
    any_datetime,
    any_decimal,
    any_float,
    any_int,
    any_str,
    any_time,
    any_timedelta,
    any_timezone,
    any_uuid,
)
from .sequences import DefaultSequenceBuilder

__all__ = [
    "DefaultSequenceBuilder",
    "PrimitiveFactory",
    "any_bool",
    "any_bytes",
    "any_complex",
    "any_date",
    "any_datetime",
    "any_decimal",
    "any_float",
    "any_int",
    "any_str",
    "any_time",
    "any_timedelta",
    "any_timezone",
    "any_uuid",
]
