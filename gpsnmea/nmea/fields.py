"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Every parser here returns None for an empty or malformed
field instead of raising, so one bad field never costs the rest of the
sentence.

Field encodings:
    time        HHMMSS[.sss]  "123519" -> 12:35:19.0
    date        DDMMYY        "230394" -> 1994-03-23 (century 1900)
    latitude    DDMM.MMMM     "4807.038","N" -> 48 + 7.038/60
    longitude   DDDMM.MMMM    "01131.000","W" -> -(11 + 31.0/60)
    magvar      D.D           "003.1","W" -> -3.1
"""

import re

from gpsnmea.nmea.types import FixQuality, GPSDate, GPSTime, RMCStatus

__all__ = [
    "DEFAULT_CENTURY",
    "parse_date",
    "parse_fix_quality",
    "parse_float_field",
    "parse_int_field",
    "parse_latitude",
    "parse_longitude",
    "parse_magnetic_variation",
    "parse_rmc_status",
    "parse_time",
]

# Two-digit years are offset by this value: "94" -> 1994, but also
# "24" -> 1924. Pass century=2000 to the decoders for post-1999 data.
DEFAULT_CENTURY = 1900

_LATITUDE_DEGREE_DIGITS = 2
_LONGITUDE_DEGREE_DIGITS = 3

# int() and float() also accept whitespace, underscores, exponents and
# "nan"; NMEA fields never contain those.
_DIGITS = re.compile(r"[0-9]+")
_INTEGER = re.compile(r"-?[0-9]+")
_UNSIGNED_DECIMAL = re.compile(r"[0-9]+(?:\.[0-9]*)?")
_DECIMAL = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def _digits(text: str) -> int:
    """Convert an unsigned integer slot, raising ValueError otherwise."""
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"not an unsigned integer: {text!r}")
    return int(text)


def _unsigned_decimal(text: str) -> float:
    """Convert an unsigned decimal slot such as "19.50", raising ValueError otherwise."""
    if not _UNSIGNED_DECIMAL.fullmatch(text):
        raise ValueError(f"not an unsigned decimal: {text!r}")
    return float(text)


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    NMEA fields may be empty (indicated by consecutive commas like ",,").
    This function treats empty strings as "no data" rather than an error.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or None if the field is empty or unparseable

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not _DECIMAL.fullmatch(value):
        return None
    return float(value)


def parse_int_field(
    value: str,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int | None:
    """Parse a string field to int, returning None if empty or invalid.

    Similar to parse_float_field but for integer values like satellite count
    or station ID. Optional bounds are inclusive; a value outside them is
    treated like unparseable text.

    Args:
        value: String value from an NMEA field
        minimum: Smallest accepted value, or None for no lower bound
        maximum: Largest accepted value, or None for no upper bound

    Returns:
        Parsed integer value, or None if the field is empty, unparseable
        or out of bounds

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("300", maximum=255)
        None
    """
    if not _INTEGER.fullmatch(value):
        return None
    number = int(value)
    if minimum is not None and number < minimum:
        return None
    if maximum is not None and number > maximum:
        return None
    return number


def parse_time(value: str) -> GPSTime | None:
    """Parse an HHMMSS[.sss] field into a GPSTime.

    The first two characters are hours, the next two minutes, and the rest
    fractional seconds.

    Example:
        >>> parse_time("235959.99")
        GPSTime(hours=23, minutes=59, seconds=59.99)
        >>> parse_time("245959")  # hour 24
        None
    """
    try:
        return GPSTime(
            hours=_digits(value[0:2]),
            minutes=_digits(value[2:4]),
            seconds=_unsigned_decimal(value[4:]),
        )
    except ValueError:
        return None


def parse_date(value: str, century: int = DEFAULT_CENTURY) -> GPSDate | None:
    """Parse a DDMMYY field into a GPSDate.

    Args:
        value: Date field, e.g. "230394"
        century: Added to the two-digit year

    Returns:
        GPSDate, or None if any part is not a number or month/day is out
        of range

    Example:
        >>> parse_date("230394")
        GPSDate(year=1994, month=3, day=23)
    """
    try:
        return GPSDate(
            year=_digits(value[4:]) + century,
            month=_digits(value[2:4]),
            day=_digits(value[0:2]),
        )
    except ValueError:
        return None


def _parse_coordinate(
    value: str,
    direction: str,
    degree_digits: int,
    positive: str,
    negative: str,
) -> float | None:
    """Convert a sexagesimal NMEA coordinate to signed decimal degrees.

    The first ``degree_digits`` characters are whole degrees, the rest are
    decimal minutes: decimal_degrees = degrees + minutes / 60.
    """
    try:
        degrees = _digits(value[:degree_digits])
        minutes = _unsigned_decimal(value[degree_digits:])
    except ValueError:
        return None

    decimal_degrees = degrees + minutes / 60.0
    if direction == positive:
        return decimal_degrees
    if direction == negative:
        return -decimal_degrees
    return None


def parse_latitude(value: str, direction: str) -> float | None:
    """Convert NMEA latitude (DDMM.MMMM) to decimal degrees.

    Args:
        value: Latitude, e.g. "4807.038" (48 degrees, 7.038 minutes)
        direction: "N" (positive) or "S" (negative)

    Returns:
        Decimal degrees, or None if the value is malformed or the
        hemisphere is anything other than N or S

    Example:
        >>> parse_latitude("4807.038", "N")
        48.1173  # 48 + 7.038/60
        >>> parse_latitude("4807.038", "X")
        None
    """
    return _parse_coordinate(value, direction, _LATITUDE_DEGREE_DIGITS, "N", "S")


def parse_longitude(value: str, direction: str) -> float | None:
    """Convert NMEA longitude (DDDMM.MMMM) to decimal degrees.

    Longitude needs three degree digits to reach 180.

    Example:
        >>> parse_longitude("01131.000", "W")
        -11.5166667  # negative for West
    """
    return _parse_coordinate(value, direction, _LONGITUDE_DEGREE_DIGITS, "E", "W")


def parse_magnetic_variation(value: str, direction: str) -> float | None:
    """Parse magnetic variation in degrees, East positive, West negative."""
    variation = parse_float_field(value)
    if variation is None:
        return None
    if direction == "E":
        return variation
    if direction == "W":
        return -variation
    return None


def parse_fix_quality(value: str) -> FixQuality | None:
    """Map the GGA quality code to FixQuality.

    An empty field is None. Any code without a FixQuality member, or text
    that is not an integer, is FixQuality.UNKNOWN.

    Example:
        >>> parse_fix_quality("4")
        <FixQuality.RTK_FIXED: 4>
        >>> parse_fix_quality("6")  # dead reckoning
        <FixQuality.UNKNOWN: -1>
    """
    if not value:
        return None
    code = parse_int_field(value, minimum=0)
    if code is None:
        return FixQuality.UNKNOWN
    try:
        return FixQuality(code)
    except ValueError:
        return FixQuality.UNKNOWN


def parse_rmc_status(value: str) -> RMCStatus | None:
    """Map "A" to ACTIVE and "V" to VOID; anything else is None."""
    try:
        return RMCStatus(value)
    except ValueError:
        return None
