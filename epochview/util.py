"""Utility constants for epochview.

Scale constants represent durations in nanoseconds, the resolution
every instant is stored at.
"""

# Time unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000

# Bounds of a 64-bit signed integer
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
