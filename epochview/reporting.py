"""Batch decoding and printing of timestamps."""

import logging
import sys
from datetime import tzinfo
from typing import TextIO

from epochview.instant import (
    Instant,
    TimestampError,
    TimestampRangeError,
    decode,
    now,
)
from epochview.parsing import parse_tokens
from epochview.times import Times
from epochview.units import Unit

logger = logging.getLogger(__name__)

NOW_LABEL = "now"


def write_times(
    out: TextIO, label: str, instant: Instant, zone: tzinfo | None = None
) -> Times:
    """Print the decoded views of `instant` under `label`."""
    times = Times.from_instant(instant, zone)
    print(f"{label}: {times.dump()}", file=out)
    return times


def report(
    raw: str | None,
    unit: Unit,
    *,
    include_now: bool = False,
    out: TextIO | None = None,
    log: logging.Logger = logger,
    strict: bool = False,
    zone: tzinfo | None = None,
) -> int:
    """
    Decode and print every timestamp in `raw`, then the current time if asked.

    Tokens that fail to parse or fall outside the representable range are
    reported on `log` and skipped. In strict mode the first such token
    raises instead.

    Args:
        raw: Comma-delimited timestamps, or None for none
        unit: Unit every token is expressed in
        include_now: Also print the current system time
        out: Stream for the report (default: stdout)
        log: Logger receiving diagnostics
        strict: Raise on the first rejected token
        zone: Zone for the local view (default: host-local)

    Returns:
        Number of rejected tokens

    Raises:
        TimestampError: For the first rejected token, in strict mode only
    """
    out = sys.stdout if out is None else out
    rejected: list[TimestampError] = []

    if raw is None:
        log.debug("no timestamps given")
    else:
        for token in parse_tokens(
            raw, log=log, strict=strict, on_reject=rejected.append
        ):
            try:
                instant = decode(token.value, unit, zone)
            except TimestampRangeError as exc:
                if strict:
                    raise
                log.error("skipping token: %s", exc)
                rejected.append(exc)
                continue
            log.info("decoded %s %s", token.text, unit.symbol)
            write_times(out, f"{token.text} {unit.symbol}", instant, zone)

    if include_now:
        write_times(out, NOW_LABEL, now(), zone)

    if rejected:
        log.warning("%d token(s) skipped", len(rejected))
    return len(rejected)
