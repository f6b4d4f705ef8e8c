"""Absolute instants and unit decoding.

An `Instant` is a timezone-independent point in time stored as integer
nanoseconds since the Unix epoch. `decode` turns an integer expressed in a
`Unit` into an `Instant`, refusing values whose date cannot be rendered.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from time import time_ns

from dateutil import tz

from epochview.units import Unit
from epochview.util import MICROSECOND, MILLISECOND, SECOND

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=tz.UTC)


class TimestampError(ValueError):
    """Base class for timestamps that cannot be reported."""


class TimestampRangeError(TimestampError):
    """Raised when a timestamp falls outside the representable date range."""

    def __init__(self, value: int, unit: Unit):
        self.value: int = value
        self.unit: Unit = unit
        message = (
            f"Timestamp {value} ({unit}) is outside the representable date range.\n"
            "Supported dates run from 0001-01-01 to 9999-12-31."
        )
        if unit is Unit.SECONDS:
            message += (
                "\nHint: check the unit, e.g. --format milliseconds for 13-digit values"
            )
        super().__init__(message)


def local_zone() -> tzinfo:
    """Return the host's local timezone."""
    return tz.tzlocal()


@dataclass(frozen=True, kw_only=True)
class Instant:
    nanos: int

    @property
    def seconds(self) -> int:
        """Whole seconds since the epoch (floor)."""
        return self.nanos // SECOND

    @property
    def millis(self) -> int:
        """Whole milliseconds since the epoch (floor)."""
        return self.nanos // MILLISECOND

    @property
    def subsec_nanos(self) -> int:
        return self.nanos % SECOND

    def to_datetime(self, zone: tzinfo = tz.UTC) -> datetime:
        """Aware datetime in `zone`, truncated to microseconds.

        Raises:
            OverflowError: If the date falls outside years 1..9999 in `zone`
        """
        utc = EPOCH + timedelta(microseconds=self.nanos // MICROSECOND)
        return utc.astimezone(zone)

    def __str__(self) -> str:
        return f"Instant({self.nanos}ns)"


def decode(value: int, unit: Unit, zone: tzinfo | None = None) -> Instant:
    """
    Interpret an integer timestamp in `unit` as an absolute instant.

    Args:
        value: Signed 64-bit count of `unit`s since the epoch
        unit: Scale of `value`
        zone: Zone the instant must also be renderable in (default: host-local)

    Returns:
        Instant at `value` units past the epoch

    Raises:
        TimestampRangeError: If the date cannot be represented. Never raised
            for nanoseconds, whose whole 64-bit range is representable.

    Example:
        >>> decode(1725932348, Unit.SECONDS).millis
        1725932348000
    """
    instant = Instant(nanos=value * unit.scale)
    if unit is Unit.NANOSECONDS:
        return instant

    zone = local_zone() if zone is None else zone
    try:
        instant.to_datetime(tz.UTC)
        instant.to_datetime(zone)
    except (OverflowError, OSError, ValueError) as exc:
        logger.debug("range check failed for %d %s: %s", value, unit.symbol, exc)
        raise TimestampRangeError(value, unit) from exc
    return instant


def now() -> Instant:
    """Current system time at nanosecond resolution."""
    return Instant(nanos=time_ns())
