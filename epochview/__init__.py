__version__ = "0.1.0"

from .instant import (
    Instant,
    TimestampError,
    TimestampRangeError,
    decode,
    now,
)
from .parsing import Token, TimestampParseError, parse_timestamp, parse_tokens
from .reporting import report
from .times import Times
from .units import Unit

__all__ = [
    "Unit",
    "Instant",
    "Times",
    "Token",
    "decode",
    "now",
    "parse_timestamp",
    "parse_tokens",
    "report",
    "TimestampError",
    "TimestampParseError",
    "TimestampRangeError",
    "__version__",
]
