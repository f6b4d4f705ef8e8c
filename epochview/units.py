"""Timestamp units and their lookup tables."""

from enum import Enum

from typing_extensions import override

from epochview.util import MICROSECOND, MILLISECOND, NANOSECOND, SECOND


class Unit(str, Enum):
    """Granularity an integer timestamp is expressed in."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"

    @property
    def scale(self) -> int:
        """Nanoseconds per unit."""
        return SCALES[self]

    @property
    def symbol(self) -> str:
        return SYMBOLS[self]

    @override
    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "Unit":
        """Look up a unit by name (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(unit.value for unit in cls)
            raise ValueError(f"Invalid unit '{name}'. Valid units: {valid}") from None


SCALES: dict[Unit, int] = {
    Unit.SECONDS: SECOND,
    Unit.MILLISECONDS: MILLISECOND,
    Unit.MICROSECONDS: MICROSECOND,
    Unit.NANOSECONDS: NANOSECOND,
}

SYMBOLS: dict[Unit, str] = {
    Unit.SECONDS: "s",
    Unit.MILLISECONDS: "ms",
    Unit.MICROSECONDS: "μs",
    Unit.NANOSECONDS: "ns",
}

DEFAULT_UNIT = Unit.SECONDS
