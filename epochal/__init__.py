from .codec import decode_epoch, encode_calendar, format_iso, parse_epoch, parse_iso
from .core import Clock, apply_duration, now, system_clock
from .duration import Duration, Months, Seconds, Years, as_seconds, is_duration, parse_duration
from .errors import EpochError, ErrorKind
from .offsets import CalendarDate, add_months, add_years, days_in_month, is_leap_year
from .util import DAY, HOUR, MINUTE, SECOND, WEEK

__all__ = [
    "Duration",
    "Seconds",
    "Months",
    "Years",
    "CalendarDate",
    "Clock",
    "EpochError",
    "ErrorKind",
    "parse_duration",
    "as_seconds",
    "is_duration",
    "apply_duration",
    "add_months",
    "add_years",
    "days_in_month",
    "is_leap_year",
    "parse_epoch",
    "parse_iso",
    "format_iso",
    "decode_epoch",
    "encode_calendar",
    "now",
    "system_clock",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
