"""Duration tokens such as ``+3h``, ``-1Y`` or ``2months``.

A duration is either a fixed number of seconds or a count of calendar
months/years whose length in seconds depends on the date it is applied to.
"""

import re
from dataclasses import dataclass
from typing import TypeAlias

from epochal.errors import EpochError, ErrorKind
from epochal.util import DAY, HOUR, MINUTE, SECOND, U64_MAX, WEEK, fits_i32, fits_i64


@dataclass(frozen=True, kw_only=True)
class Seconds:
    """Fixed offset in seconds (s, m, h, d, w)."""

    seconds: int

    def __post_init__(self) -> None:
        if not fits_i64(self.seconds):
            raise EpochError(ErrorKind.OVERFLOW, str(self.seconds))


@dataclass(frozen=True, kw_only=True)
class Months:
    """Calendar month offset (M)."""

    months: int

    def __post_init__(self) -> None:
        if not fits_i32(self.months):
            raise EpochError(ErrorKind.OVERFLOW, str(self.months))


@dataclass(frozen=True, kw_only=True)
class Years:
    """Calendar year offset (Y)."""

    years: int

    def __post_init__(self) -> None:
        if not fits_i32(self.years):
            raise EpochError(ErrorKind.OVERFLOW, str(self.years))


Duration: TypeAlias = Seconds | Months | Years

# Single-letter calendar forms are case-sensitive: lowercase "m" is minutes
_MONTH_LETTERS = frozenset({"M"})
_YEAR_LETTERS = frozenset({"Y", "y"})
_MONTH_WORDS = frozenset({"mo", "month", "months"})
_YEAR_WORDS = frozenset({"yr", "year", "years"})

# Fixed units, matched case-insensitively
_SCALES = {
    "": SECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
    "d": DAY,
    "w": WEEK,
}

# Last characters that mark a digit-first token as a duration. Must cover
# every single-letter suffix accepted by parse_duration.
_UNIT_LETTERS = frozenset("smhdwSHDWMYy")

_MAGNITUDE = re.compile(r"[0-9]+")


def _calendar_unit(unit: str) -> type[Months] | type[Years] | None:
    if unit in _MONTH_LETTERS:
        return Months
    if unit in _YEAR_LETTERS:
        return Years
    if len(unit) > 1:
        folded = unit.lower()
        if folded in _MONTH_WORDS:
            return Months
        if folded in _YEAR_WORDS:
            return Years
    return None


def parse_duration(text: str) -> Duration:
    """Parse a duration token.

    Grammar: optional sign, one or more ASCII digits, optional unit suffix.
    Surrounding whitespace is ignored; none is allowed inside the token.

    Args:
        text: Token such as "30s", "-5m", "+3M", "1Y" or "2months"

    Returns:
        Seconds for fixed units (bare numbers are seconds), Months or Years
        for calendar units

    Raises:
        EpochError: INVALID_DURATION for a malformed token, UNSUPPORTED_UNIT
            for an unknown suffix, OVERFLOW when the value does not fit

    Example:
        >>> parse_duration("-5m")
        Seconds(seconds=-300)
        >>> parse_duration("2months")
        Months(months=2)
    """
    token = text.strip()
    if not token:
        raise EpochError(ErrorKind.INVALID_DURATION, text)

    sign = 1
    rest = token
    if token[0] == "+":
        rest = token[1:]
    elif token[0] == "-":
        sign = -1
        rest = token[1:]

    match = _MAGNITUDE.match(rest)
    if match is None:
        raise EpochError(ErrorKind.INVALID_DURATION, token)

    magnitude = int(match.group())
    if magnitude > U64_MAX:
        raise EpochError(ErrorKind.INVALID_DURATION, token)
    unit = rest[match.end() :]

    calendar = _calendar_unit(unit)
    if calendar is not None:
        count = sign * magnitude
        if not fits_i32(count):
            raise EpochError(ErrorKind.OVERFLOW, token)
        if calendar is Months:
            return Months(months=count)
        return Years(years=count)

    scale = _SCALES.get(unit.lower())
    if scale is None:
        raise EpochError(ErrorKind.UNSUPPORTED_UNIT, unit)

    seconds = sign * magnitude * scale
    if not fits_i64(seconds):
        raise EpochError(ErrorKind.OVERFLOW, token)
    return Seconds(seconds=seconds)


def as_seconds(duration: Duration) -> int | None:
    """Return the seconds of a fixed duration, None for calendar units."""
    if isinstance(duration, Seconds):
        return duration.seconds
    return None


def is_duration(text: str) -> bool:
    """Cheap check for whether a token should be parsed as a duration.

    A leading sign is enough, so some tokens pass here and still fail in
    parse_duration. Otherwise the token must start with a digit and end with
    a unit letter; bare integers and keywords like "now" are not durations.
    """
    token = text.strip()
    if not token:
        return False

    first = token[0]
    if first in "+-":
        return True
    if "0" <= first <= "9":
        return token[-1] in _UNIT_LETTERS
    return False
