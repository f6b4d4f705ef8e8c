"""Decoded views of an instant and their fixed text dump."""

from dataclasses import dataclass
from datetime import datetime, tzinfo

from dateutil import tz

from epochview.instant import Instant, local_zone
from epochview.util import MICROSECOND, MILLISECOND


@dataclass(frozen=True, kw_only=True)
class Times:
    instant: Instant
    local_time: datetime
    utc: datetime
    unix_time_s: int
    unix_time_ms: int

    @classmethod
    def from_instant(cls, instant: Instant, zone: tzinfo | None = None) -> "Times":
        """Derive local, UTC and epoch views of `instant`.

        `zone` defaults to the host's local timezone.
        """
        zone = local_zone() if zone is None else zone
        return cls(
            instant=instant,
            local_time=instant.to_datetime(zone),
            utc=instant.to_datetime(tz.UTC),
            unix_time_s=instant.seconds,
            unix_time_ms=instant.millis,
        )

    def dump(self) -> str:
        """Multi-line, field-labelled rendering."""
        fraction = _fraction(self.instant.subsec_nanos)
        return (
            "Times {\n"
            f"    local_time: {_isoformat(self.local_time, fraction)},\n"
            f"    utc: {_isoformat(self.utc, fraction, utc=True)},\n"
            f"    unix_time_s: {self.unix_time_s},\n"
            f"    unix_time_ms: {self.unix_time_ms},\n"
            "}"
        )

    def __str__(self) -> str:
        return self.dump()


def _fraction(nanos: int) -> str:
    # Shortest of 3, 6 or 9 digits that is exact
    if nanos == 0:
        return ""
    if nanos % MILLISECOND == 0:
        return f".{nanos // MILLISECOND:03d}"
    if nanos % MICROSECOND == 0:
        return f".{nanos // MICROSECOND:06d}"
    return f".{nanos:09d}"


def _isoformat(dt: datetime, fraction: str, *, utc: bool = False) -> str:
    base = dt.replace(microsecond=0, tzinfo=None).isoformat()
    return f"{base}{fraction}{'Z' if utc else _offset(dt)}"


def _offset(dt: datetime) -> str:
    offset = dt.utcoffset()
    total = int(offset.total_seconds()) if offset is not None else 0
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text
