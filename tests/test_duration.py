"""Tests for duration token parsing and the duration heuristic."""

import pytest

from epochal import (
    EpochError,
    ErrorKind,
    Months,
    Seconds,
    Years,
    as_seconds,
    is_duration,
    parse_duration,
)


@pytest.mark.parametrize(
    "token, seconds",
    [
        ("30s", 30),
        ("+30s", 30),
        ("-30s", -30),
        ("5m", 300),
        ("-5m", -300),
        ("2h", 7200),
        ("+2h", 7200),
        ("7d", 604800),
        ("-1d", -86400),
        ("2w", 1209600),
        ("3600", 3600),
        ("-0", 0),
    ],
)
def test_fixed_units(token, seconds):
    """Test parsing fixed-length units into seconds."""
    assert parse_duration(token) == Seconds(seconds=seconds)


def test_fixed_units_are_case_insensitive():
    """Uppercase fixed units match their lowercase forms."""
    assert parse_duration("1H") == parse_duration("1h")
    assert parse_duration("1D") == parse_duration("1d")
    assert parse_duration("1W") == parse_duration("1w")
    assert parse_duration("1S") == parse_duration("1s")


def test_surrounding_whitespace_is_ignored():
    """Test that tokens are trimmed before parsing."""
    assert parse_duration("  +3h \n") == Seconds(seconds=10800)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("1M", Months(months=1)),
        ("+3M", Months(months=3)),
        ("-6M", Months(months=-6)),
        ("12M", Months(months=12)),
        ("100M", Months(months=100)),
        ("1mo", Months(months=1)),
        ("2month", Months(months=2)),
        ("2months", Months(months=2)),
        ("3MONTHS", Months(months=3)),
        ("1Y", Years(years=1)),
        ("+2Y", Years(years=2)),
        ("-1Y", Years(years=-1)),
        ("1y", Years(years=1)),
        ("1yr", Years(years=1)),
        ("2year", Years(years=2)),
        ("3years", Years(years=3)),
        ("4Years", Years(years=4)),
        ("50Y", Years(years=50)),
    ],
)
def test_calendar_units(token, expected):
    """Test parsing month and year units."""
    assert parse_duration(token) == expected


def test_lowercase_m_is_minutes_not_months():
    """Test that "m" means minutes and "M" means months."""
    assert parse_duration("1m") == Seconds(seconds=60)
    assert parse_duration("1M") == Months(months=1)


@pytest.mark.parametrize("token", ["", "   ", "abc", "++5s", "--5s", "+", "-", "+s"])
def test_malformed_tokens(token):
    """Test that tokens without a magnitude are invalid."""
    with pytest.raises(EpochError) as exc_info:
        parse_duration(token)
    assert exc_info.value.kind is ErrorKind.INVALID_DURATION


def test_malformed_token_error_names_input():
    """Test that the error carries the offending token."""
    with pytest.raises(EpochError) as exc_info:
        parse_duration("++5s")
    assert exc_info.value.value == "++5s"
    assert str(exc_info.value) == "invalid duration: ++5s"


@pytest.mark.parametrize("token, unit", [("5x", "x"), ("10foo", "foo"), ("3 h", " h")])
def test_unknown_unit(token, unit):
    """Test that unknown suffixes are unsupported units."""
    with pytest.raises(EpochError) as exc_info:
        parse_duration(token)
    assert exc_info.value.kind is ErrorKind.UNSUPPORTED_UNIT
    assert exc_info.value.value == unit


def test_magnitude_beyond_u64_is_invalid():
    """Test that magnitudes beyond 64 bits are invalid durations."""
    with pytest.raises(EpochError) as exc_info:
        parse_duration("18446744073709551616s")
    assert exc_info.value.kind is ErrorKind.INVALID_DURATION


def test_fixed_overflow():
    """Values that fit u64 but not i64 seconds overflow."""
    with pytest.raises(EpochError) as exc_info:
        parse_duration("9223372036854775808")
    assert exc_info.value.kind is ErrorKind.OVERFLOW

    with pytest.raises(EpochError) as exc_info:
        parse_duration("153722867280912931m")
    assert exc_info.value.kind is ErrorKind.OVERFLOW


def test_fixed_bounds_are_accepted():
    """Test that fixed durations at the 64-bit bounds parse."""
    assert parse_duration("9223372036854775807") == Seconds(seconds=2**63 - 1)
    assert parse_duration("-9223372036854775808s") == Seconds(seconds=-(2**63))


def test_calendar_overflow():
    """Test that calendar counts beyond 32 bits overflow."""
    assert parse_duration("2147483647M") == Months(months=2**31 - 1)
    assert parse_duration("-2147483648Y") == Years(years=-(2**31))

    for token in ("2147483648M", "-2147483649Y"):
        with pytest.raises(EpochError) as exc_info:
            parse_duration(token)
        assert exc_info.value.kind is ErrorKind.OVERFLOW


def test_variants_validate_range():
    """Test that duration variants validate their range."""
    with pytest.raises(EpochError):
        Months(months=2**31)
    with pytest.raises(EpochError):
        Seconds(seconds=2**63)


def test_as_seconds():
    """Test converting fixed durations to seconds."""
    assert as_seconds(Seconds(seconds=-300)) == -300
    assert as_seconds(Months(months=1)) is None
    assert as_seconds(Years(years=1)) is None


@pytest.mark.parametrize(
    "token",
    ["+3h", "-7d", "30s", "2w", "1M", "+3M", "-6M", "1Y", "+2Y", "-1Y", "1y", "5H", "2months", "3years"],
)
def test_is_duration_accepts_parseable_tokens(token):
    """Test that duration-looking tokens are recognised."""
    assert is_duration(token)
    parse_duration(token)


@pytest.mark.parametrize("token", ["1704912345", "0", "now", "", "   ", "abc", "2024-01-10T12:00:00Z"])
def test_is_duration_rejects_non_durations(token):
    """Test that epochs and words are not durations."""
    assert not is_duration(token)


def test_is_duration_accepts_any_signed_token():
    """A sign is enough; the parser rejects these later."""
    assert is_duration("+abc")
    assert is_duration("-")
    with pytest.raises(EpochError):
        parse_duration("+abc")
