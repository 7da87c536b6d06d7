"""
Scalar value factories.

Every function here takes the generating source (the engine or a
resolution context) and builds its value from ``any_double`` so that all
randomness flows through the engine's single random stream.
"""

import math
import uuid
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from decimal import Decimal
from functools import partial
from typing import Any

from ..core.types import AnonymousDataSource, Factory
from ..utilities.constants import DEFAULT_STRING_LENGTH, MAX_DOUBLE, STRING_ALPHABET
from ..utilities.validators import validate_in_range

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

DEFAULT_FLOAT_MIN = -1_000_000.0
DEFAULT_FLOAT_MAX = 1_000_000.0

DECIMAL_PLACES = Decimal("0.0001")

DATETIME_MIN = datetime(1900, 1, 1)
DATETIME_MAX = datetime(2100, 1, 1)

MAX_TIMEDELTA = timedelta(days=365)

# UTC offsets in use worldwide run from -12:00 to +14:00
TIMEZONE_MIN_QUARTERS = -48
TIMEZONE_MAX_QUARTERS = 56


def any_bool(data: AnonymousDataSource) -> bool:
    """Create a random boolean."""
    return data.any_double(0.0, 1.0) < 0.5


def any_int(data: AnonymousDataSource, minimum: int = INT32_MIN, maximum: int = INT32_MAX) -> int:
    """Create a random integer in [minimum, maximum]."""
    validate_in_range(
        maximum,
        minimum,
        MAX_DOUBLE,
        "maximum",
        "The maximum value must be greater than the minimum value.",
    )
    value = math.floor(data.any_double(minimum, maximum + 1))
    return min(value, maximum)


def any_float(
    data: AnonymousDataSource,
    minimum: float = DEFAULT_FLOAT_MIN,
    maximum: float = DEFAULT_FLOAT_MAX,
) -> float:
    """Create a random float in [minimum, maximum)."""
    return data.any_double(minimum, maximum)


def any_complex(data: AnonymousDataSource) -> complex:
    """Create a random complex number."""
    return complex(any_float(data), any_float(data))


def any_str(data: AnonymousDataSource, length: int = DEFAULT_STRING_LENGTH) -> str:
    """Create a random alphanumeric string."""
    last = len(STRING_ALPHABET) - 1
    return "".join(STRING_ALPHABET[any_int(data, 0, last)] for _ in range(length))


def any_bytes(data: AnonymousDataSource, length: int = 16) -> bytes:
    """Create random bytes."""
    return bytes(any_int(data, 0, 255) for _ in range(length))


def any_decimal(
    data: AnonymousDataSource,
    minimum: float = DEFAULT_FLOAT_MIN,
    maximum: float = DEFAULT_FLOAT_MAX,
) -> Decimal:
    """Create a random Decimal with four decimal places."""
    return Decimal(repr(data.any_double(minimum, maximum))).quantize(DECIMAL_PLACES)


def any_datetime(
    data: AnonymousDataSource, minimum: datetime = DATETIME_MIN, maximum: datetime = DATETIME_MAX
) -> datetime:
    """Create a random naive datetime in [minimum, maximum)."""
    span = (maximum - minimum).total_seconds()
    return minimum + timedelta(seconds=data.any_double(0.0, span))


def any_date(data: AnonymousDataSource) -> date:
    """Create a random date."""
    return any_datetime(data).date()


def any_time(data: AnonymousDataSource) -> time:
    """Create a random time of day."""
    return any_datetime(data).time()


def any_timedelta(data: AnonymousDataSource, maximum: timedelta = MAX_TIMEDELTA) -> timedelta:
    """Create a random non-negative timedelta below ``maximum``."""
    return timedelta(seconds=data.any_double(0.0, maximum.total_seconds()))


def any_timezone(data: AnonymousDataSource) -> timezone:
    """Create a fixed-offset timezone on a quarter-hour boundary."""
    quarters = any_int(data, TIMEZONE_MIN_QUARTERS, TIMEZONE_MAX_QUARTERS)
    return timezone(timedelta(minutes=15 * quarters))


def any_uuid(data: AnonymousDataSource) -> uuid.UUID:
    """Create a random version 4 UUID."""
    return uuid.UUID(bytes=any_bytes(data, 16), version=4)


class PrimitiveFactory:
    """
    Default table of scalar factories.

    Registered by the engine at construction time, before any caller
    registration, so a caller can replace any entry by registering the
    same type again.
    """

    def __init__(self, string_length: int = DEFAULT_STRING_LENGTH) -> None:
        self.string_length = string_length

    def factories(self) -> dict[Any, Factory]:
        """Get the scalar type to factory mapping."""
        return {
            bool: any_bool,
            int: any_int,
            float: any_float,
            complex: any_complex,
            str: partial(any_str, length=self.string_length),
            bytes: any_bytes,
            bytearray: lambda data: bytearray(any_bytes(data)),
            Decimal: any_decimal,
            datetime: any_datetime,
            date: any_date,
            time: any_time,
            timedelta: any_timedelta,
            timezone: any_timezone,
            tzinfo: any_timezone,
            uuid.UUID: any_uuid,
        }

    def register_with(self, engine: Any) -> None:
        """Register every scalar factory with an engine."""
        for type_, factory in self.factories().items():
            engine.register(type_, factory)
