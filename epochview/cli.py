"""Command line entry point.

    epochview 1725932348,1725932349 --format seconds --now -vv
"""

import argparse
import logging
import os
import re
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from epochview import __version__
from epochview.instant import TimestampError
from epochview.log import configure, level_for, level_named
from epochview.reporting import logger as report_logger
from epochview.reporting import report
from epochview.units import DEFAULT_UNIT, Unit

logger = logging.getLogger(__name__)

LOG_ENV = "EPOCHVIEW_LOG"

EXIT_OK = 0
EXIT_REJECTED = 1

# A comma list whose first token is negative, e.g. "-5,3"
_NEGATIVE_LIST = re.compile(r"-[0-9][0-9,\s+-]*")

_TIMESTAMP_FLAGS = ("-t", "--timestamp")


@dataclass(frozen=True, kw_only=True)
class Settings:
    timestamps: str | None = None
    unit: Unit = DEFAULT_UNIT
    include_now: bool = False
    strict: bool = False
    level: int = logging.ERROR


def _unit(name: str) -> Unit:
    try:
        return Unit.parse(name)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epochview",
        description=(
            "Decode integer Unix timestamps into local time, UTC, "
            "and epoch seconds and milliseconds."
        ),
    )
    parser.add_argument(
        "timestamps",
        nargs="?",
        help="comma-delimited timestamps, e.g. 1725932348,1725932349",
    )
    parser.add_argument(
        "-t",
        "--timestamp",
        dest="timestamp_option",
        metavar="TIMESTAMPS",
        help="same as the positional argument",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=_unit,
        default=DEFAULT_UNIT,
        metavar="{" + ",".join(unit.value for unit in Unit) + "}",
        help="unit the timestamps are given in (default: %(default)s)",
    )
    parser.add_argument(
        "-n",
        "-i",
        "--now",
        "--include-now",
        dest="include_now",
        action="store_true",
        help="also show the current time",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="abort with a non-zero status on the first invalid timestamp",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="more diagnostics (-v warn, -vv info, -vvv debug, -vvvv trace)",
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="no diagnostics"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def bind_negative_lists(argv: Sequence[str]) -> list[str]:
    """Attach timestamp lists starting with "-" to --timestamp.

    argparse reads "-5,3" as an unknown option, so such values are passed as
    "--timestamp=-5,3" instead, whether given positionally or after -t.
    """
    bound: list[str] = []
    for index, arg in enumerate(argv):
        if arg == "--":
            bound.extend(argv[index:])
            break
        if not _NEGATIVE_LIST.fullmatch(arg):
            bound.append(arg)
        elif bound and bound[-1] in _TIMESTAMP_FLAGS:
            bound[-1] = f"--timestamp={arg}"
        else:
            bound.append(f"--timestamp={arg}")
    return bound


def parse_settings(
    argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None
) -> Settings:
    """Build `Settings` from the command line and environment.

    Exits with status 2 on invalid arguments.
    """
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv
    args = parser.parse_args(bind_negative_lists(argv))
    environ = os.environ if environ is None else environ

    if args.timestamps is not None and args.timestamp_option is not None:
        parser.error("give timestamps either positionally or with --timestamp")

    if args.quiet or args.verbose or LOG_ENV not in environ:
        level = level_for(args.verbose, args.quiet)
    else:
        try:
            level = level_named(environ[LOG_ENV])
        except ValueError as exc:
            parser.error(f"{LOG_ENV}: {exc}")

    return Settings(
        timestamps=(
            args.timestamps if args.timestamps is not None else args.timestamp_option
        ),
        unit=args.format,
        include_now=args.include_now,
        strict=args.strict,
        level=level,
    )


def run(settings: Settings) -> int:
    """Report as configured and return the exit status."""
    logger.debug("settings: %s", settings)
    try:
        report(
            settings.timestamps,
            settings.unit,
            include_now=settings.include_now,
            log=report_logger,
            strict=settings.strict,
        )
    except TimestampError as exc:
        logger.error("%s", exc)
        return EXIT_REJECTED
    return EXIT_OK


def main(
    argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None
) -> int:
    settings = parse_settings(argv, environ)
    configure(settings.level)
    return run(settings)
