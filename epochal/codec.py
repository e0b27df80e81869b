"""Conversions between epoch seconds, calendar dates and ISO-8601 text.

All conversions are in UTC. The representable range is that of
``datetime``: 0001-01-01T00:00:00Z through 9999-12-31T23:59:59Z.
"""

import re
from datetime import datetime, time, timedelta, timezone

from dateutil.parser import isoparse

from epochal.errors import EpochError, ErrorKind
from epochal.offsets import CalendarDate
from epochal.util import SECOND, fits_i64

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=SECOND)

_EPOCH_PATTERN = re.compile(r"[+-]?[0-9]+")

# Index of the first character after a YYYY-MM-DD date
_DATE_END = 10


def _to_datetime(epoch: int) -> datetime:
    try:
        return EPOCH + timedelta(seconds=epoch)
    except OverflowError as err:
        raise EpochError(ErrorKind.INVALID_EPOCH, str(epoch)) from err


def _to_epoch(dt: datetime) -> int:
    # Floor division drops sub-second precision toward negative infinity
    return (dt - EPOCH) // _ONE_SECOND


def parse_epoch(text: str) -> int:
    """Parse a string of epoch seconds (surrounding whitespace ignored).

    Raises:
        EpochError: INVALID_EPOCH if the text is not a signed 64-bit integer
    """
    token = text.strip()
    if not _EPOCH_PATTERN.fullmatch(token):
        raise EpochError(ErrorKind.INVALID_EPOCH, token)
    value = int(token)
    if not fits_i64(value):
        raise EpochError(ErrorKind.INVALID_EPOCH, token)
    return value


def decode_epoch(epoch: int) -> tuple[CalendarDate, time]:
    """Split epoch seconds into a UTC calendar date and time of day.

    Raises:
        EpochError: INVALID_EPOCH if the epoch falls outside the datetime range
    """
    dt = _to_datetime(epoch)
    date = CalendarDate(year=dt.year, month=dt.month, day=dt.day)
    return date, dt.time()


def encode_calendar(date: CalendarDate, time_of_day: time) -> int:
    """Reassemble a calendar date and time of day into epoch seconds (UTC).

    Raises:
        EpochError: OVERFLOW if the date falls outside the datetime range
    """
    try:
        dt = datetime(
            date.year,
            date.month,
            date.day,
            time_of_day.hour,
            time_of_day.minute,
            time_of_day.second,
            tzinfo=timezone.utc,
        )
    except (ValueError, OverflowError) as err:
        raise EpochError(ErrorKind.OVERFLOW, str(date)) from err
    return _to_epoch(dt)


def format_iso(epoch: int) -> str:
    """Render epoch seconds as ``YYYY-MM-DDTHH:MM:SSZ``.

    Example:
        >>> format_iso(1704888000)
        '2024-01-10T12:00:00Z'
    """
    dt = _to_datetime(epoch)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}Z"
    )


def has_timezone(text: str) -> bool:
    """Check for a timezone designator before attempting a full parse.

    A "Z" or "+" anywhere counts, as does a "-" past the date portion.
    """
    if "Z" in text or "+" in text:
        return True
    return "-" in text[_DATE_END + 1 :]


def parse_iso(text: str) -> int:
    """Parse an ISO-8601 date-time with a timezone into epoch seconds.

    Offsets are honoured, so "12:00:00+02:00" is two hours earlier than
    "12:00:00Z". Fractional seconds are floored.

    Raises:
        EpochError: MISSING_TIMEZONE if no timezone designator is present,
            INVALID_ISO if the text has one but does not parse
    """
    token = text.strip()
    if not has_timezone(token):
        raise EpochError(ErrorKind.MISSING_TIMEZONE, token)

    try:
        dt = isoparse(token)
    except (ValueError, OverflowError) as err:
        raise EpochError(ErrorKind.INVALID_ISO, token) from err

    if dt.tzinfo is None or dt.utcoffset() is None:
        raise EpochError(ErrorKind.INVALID_ISO, token)

    return _to_epoch(dt)
