"""Calendar-aware month and year offsets with day clamping.

Adding months or years keeps the day of month where possible. When the
target month is shorter, the day is pulled back to its last day:

    >>> add_months(CalendarDate(year=2023, month=1, day=31), 1)
    CalendarDate(year=2023, month=2, day=28)
    >>> add_years(CalendarDate(year=2024, month=2, day=29), 1)
    CalendarDate(year=2025, month=2, day=28)
"""

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR

from epochal.errors import EpochError, ErrorKind


def is_leap_year(year: int) -> bool:
    """Divisible by 4, except centuries not divisible by 400."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


@dataclass(frozen=True, kw_only=True)
class CalendarDate:
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not (1 <= self.month <= 12):
            raise ValueError(f"month must be in range [1, 12], got {self.month}")
        last = days_in_month(self.year, self.month)
        if not (1 <= self.day <= last):
            raise ValueError(
                f"day must be in range [1, {last}] for "
                f"{self.year:04d}-{self.month:02d}, got {self.day}"
            )

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def _clamped(year: int, month: int, day: int) -> CalendarDate:
    # Anything outside the datetime range cannot be turned back into an epoch
    if not (MINYEAR <= year <= MAXYEAR):
        raise EpochError(ErrorKind.OVERFLOW, str(year))
    return CalendarDate(year=year, month=month, day=min(day, days_in_month(year, month)))


def add_months(date: CalendarDate, months: int) -> CalendarDate:
    """Shift a date by a number of calendar months.

    Works on the absolute month index (year * 12 + month - 1) so negative
    offsets cross year boundaries correctly, then clamps the day to the
    length of the resulting month.

    Raises:
        EpochError: OVERFLOW if the resulting year is not representable
    """
    total = date.year * 12 + (date.month - 1) + months
    year, index = divmod(total, 12)
    return _clamped(year, index + 1, date.day)


def add_years(date: CalendarDate, years: int) -> CalendarDate:
    """Shift a date by a number of calendar years.

    Only February 29 needs clamping: it becomes February 28 in a non-leap
    target year.

    Raises:
        EpochError: OVERFLOW if the resulting year is not representable
    """
    return _clamped(date.year + years, date.month, date.day)
