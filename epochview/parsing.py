"""Parsing of comma-delimited timestamp lists."""

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from epochview.instant import TimestampError
from epochview.log import TRACE
from epochview.util import I64_MAX, I64_MIN

_INTEGER = re.compile(r"[+-]?[0-9]+")


class TimestampParseError(TimestampError):
    """Raised when a token is not a 64-bit signed integer."""

    def __init__(self, token: str, reason: str = "not an integer"):
        self.token: str = token
        super().__init__(f"Invalid timestamp '{token}': {reason}")


@dataclass(frozen=True, kw_only=True)
class Token:
    text: str
    value: int


def split_tokens(raw: str) -> list[str]:
    """Split on commas, trimming whitespace and dropping empty tokens."""
    return [text for text in (piece.strip() for piece in raw.split(",")) if text]


def parse_timestamp(text: str) -> int:
    """Parse one trimmed token as a signed 64-bit integer.

    Raises:
        TimestampParseError: If `text` is not an integer or overflows 64 bits
    """
    if not _INTEGER.fullmatch(text):
        raise TimestampParseError(text)
    value = int(text)
    if not (I64_MIN <= value <= I64_MAX):
        raise TimestampParseError(text, "out of range for a 64-bit integer")
    return value


def parse_tokens(
    raw: str,
    *,
    log: logging.Logger,
    strict: bool = False,
    on_reject: Callable[[TimestampParseError], object] | None = None,
) -> Iterator[Token]:
    """
    Yield the valid timestamps of a comma-delimited list, in input order.

    Empty tokens are dropped silently. Invalid tokens are reported on `log`
    and skipped, or raised when `strict` is set.

    Args:
        raw: Comma-delimited tokens, e.g. "1725932348,1725932349"
        log: Logger receiving diagnostics for rejected tokens
        strict: Raise instead of skipping invalid tokens
        on_reject: Called with the error for every skipped token

    Raises:
        TimestampParseError: For the first invalid token, in strict mode only

    Example:
        >>> [t.value for t in parse_tokens(" 1, ,2,", log=logging.getLogger())]
        [1, 2]
    """
    for text in split_tokens(raw):
        try:
            value = parse_timestamp(text)
        except TimestampParseError as exc:
            if strict:
                raise
            log.error("skipping token: %s", exc)
            if on_reject is not None:
                on_reject(exc)
            continue
        log.log(TRACE, "parsed token %r as %d", text, value)
        yield Token(text=text, value=value)
