"""Utility constants and helpers for epochal.

Time unit constants represent durations in seconds.
These are used throughout the API for consistent time representation.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Integer bounds enforced on values that would be fixed-width elsewhere
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


def fits_i32(value: int) -> bool:
    return I32_MIN <= value <= I32_MAX


def fits_i64(value: int) -> bool:
    return I64_MIN <= value <= I64_MAX
