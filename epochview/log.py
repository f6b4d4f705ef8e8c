"""Diagnostic logging setup.

Library modules only ever create loggers. `configure` is called once by the
command line entry point and attaches a single stderr handler to the
package logger.
"""

import logging
import sys
from typing import TextIO

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

OFF = logging.CRITICAL + 10

# Verbosity count (-v flags) to level; 0 is the default
_VERBOSITY = [logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG, TRACE]

_NAMES = {
    "off": OFF,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

FORMAT = "%(levelname)s %(name)s: %(message)s"


def level_for(verbose: int = 0, quiet: bool = False) -> int:
    """Map a -v count and -q flag to a logging level."""
    if quiet:
        return OFF
    return _VERBOSITY[min(max(verbose, 0), len(_VERBOSITY) - 1)]


def level_named(name: str) -> int:
    """Look up a level by name, e.g. "debug"."""
    key = name.strip().lower()
    if key not in _NAMES:
        valid = ", ".join(_NAMES)
        raise ValueError(f"Invalid log level '{name}'. Valid levels: {valid}")
    return _NAMES[key]


def configure(level: int, stream: TextIO | None = None) -> logging.Logger:
    """Route the package's diagnostics at `level` or above to `stream`."""
    root = logging.getLogger("epochview")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(logging.Formatter(FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return root
