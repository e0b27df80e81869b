"""Applying durations to epoch values, and reading the current time."""

from collections.abc import Callable
from time import time as current_time
from typing import TypeAlias

from typing_extensions import assert_never

from epochal.codec import decode_epoch, encode_calendar
from epochal.duration import Duration, Months, Seconds, Years
from epochal.errors import EpochError, ErrorKind
from epochal.offsets import add_months, add_years
from epochal.util import fits_i64

Clock: TypeAlias = Callable[[], int]


def system_clock() -> int:
    """Current wall-clock time in whole epoch seconds."""
    return int(current_time())


def now(clock: Clock = system_clock) -> int:
    """Return the current epoch, read through an injectable clock.

    Example:
        >>> now(clock=lambda: 1704888000)
        1704888000
    """
    return clock()


def apply_duration(epoch: int, duration: Duration) -> int:
    """Offset an epoch by a duration.

    Fixed durations are plain addition. Calendar durations go through the
    UTC calendar date: the date is shifted with day clamping and the
    original time of day is kept.

    Args:
        epoch: Epoch seconds
        duration: Seconds, Months or Years

    Returns:
        The shifted epoch seconds

    Raises:
        EpochError: OVERFLOW if the result is out of range, INVALID_EPOCH if
            a calendar offset is applied to an epoch with no calendar date

    Example:
        >>> apply_duration(1675166400, Months(months=1))  # 2023-01-31T12:00Z
        1677585600
    """
    match duration:
        case Seconds(seconds=seconds):
            result = epoch + seconds
            if not fits_i64(result):
                raise EpochError(ErrorKind.OVERFLOW, f"{epoch} + {seconds}")
            return result
        case Months(months=months):
            date, time_of_day = decode_epoch(epoch)
            return encode_calendar(add_months(date, months), time_of_day)
        case Years(years=years):
            date, time_of_day = decode_epoch(epoch)
            return encode_calendar(add_years(date, years), time_of_day)
        case _:
            assert_never(duration)
