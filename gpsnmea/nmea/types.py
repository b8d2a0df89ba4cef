"""NMEA data types for decoded sentences.

This module defines the value types and record dataclasses produced by the
sentence decoders.

Design Decisions:
    1. Optional attributes (float | None): every record attribute is decoded
       independently. None means "field empty or unparseable", which keeps
       "no data received" apart from "measured zero". A record whose
       attributes are all None is the normal result for a sentence with the
       wrong field count; it is not an error.

    2. Range checks at construction: GPSTime and GPSDate raise ValueError
       for out-of-range components, so an instance is always in range. The
       field decoders turn that ValueError into None.

    3. Closed enumerations: FixQuality has an UNKNOWN member because
       receivers report codes beyond the ones listed here (3 = PPS,
       6 = dead reckoning, ...). RMCStatus has no such member: a status
       other than A or V makes the attribute None.

    4. Derived validity: ``valid`` is a property computed from the decoded
       attributes, not a stored field, so it can never disagree with them.
"""

import datetime
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "FixQuality",
    "GGAData",
    "GPSDate",
    "GPSTime",
    "RMCData",
    "RMCStatus",
    "ZDAData",
]

_MICROSECONDS_PER_SECOND = 1_000_000


@dataclass(frozen=True)
class GPSTime:
    """UTC time of day as reported by the receiver.

    Attributes:
        hours: 0-23.
        minutes: 0-59.
        seconds: Fractional seconds, 0 <= seconds < 60.

    Raises:
        ValueError: If any component is out of range (NaN included).
    """

    hours: int
    minutes: int
    seconds: float

    def __post_init__(self) -> None:
        if not 0 <= self.hours <= 23:
            raise ValueError(f"hours out of range: {self.hours}")
        if not 0 <= self.minutes <= 59:
            raise ValueError(f"minutes out of range: {self.minutes}")
        # Written so that NaN fails the comparison
        if not 0.0 <= self.seconds < 60.0:
            raise ValueError(f"seconds out of range: {self.seconds}")

    def to_time(self) -> datetime.time:
        """Convert to ``datetime.time``, truncating to whole microseconds.

        Example:
            >>> GPSTime(23, 59, 59.99).to_time()
            datetime.time(23, 59, 59, 990000)
        """
        whole_seconds = int(self.seconds)
        microseconds = int(
            round((self.seconds - whole_seconds) * _MICROSECONDS_PER_SECOND, 3)
        )
        return datetime.time(
            self.hours,
            self.minutes,
            whole_seconds,
            min(microseconds, _MICROSECONDS_PER_SECOND - 1),
        )


@dataclass(frozen=True)
class GPSDate:
    """Calendar date as reported by the receiver.

    Only month <= 12 and day <= 31 are enforced. Month lengths are not
    checked, so February 30 is a valid GPSDate; ``to_date()`` is where
    calendar correctness is applied.

    Attributes:
        year: Four-digit year.
        month: 1-12.
        day: 1-31.

    Raises:
        ValueError: If month or day is out of range.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month out of range: {self.month}")
        if not 1 <= self.day <= 31:
            raise ValueError(f"day out of range: {self.day}")

    def to_date(self) -> datetime.date:
        """Convert to ``datetime.date``.

        Raises:
            ValueError: For dates that do not exist in the calendar.
        """
        return datetime.date(self.year, self.month, self.day)


class FixQuality(Enum):
    """GGA fix quality indicator.

    Values are the NMEA codes; UNKNOWN stands for every other code.
    """

    INVALID = 0
    GPS = 1
    DGPS = 2
    RTK_FIXED = 4
    RTK_FLOAT = 5
    UNKNOWN = -1


class RMCStatus(Enum):
    """RMC receiver status."""

    ACTIVE = "A"
    VOID = "V"


@dataclass(frozen=True)
class GGAData:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    GGA provides the primary position fix information from GNSS receivers,
    including coordinates, altitude, and fix quality metrics.

    Attributes:
        time: UTC time of the fix. None if empty or out of range.

        latitude_degrees: Latitude in decimal degrees, positive=North.
            Converted from NMEA's DDMM.MMMM format. None if the value or
            hemisphere field is empty or invalid.

        longitude_degrees: Longitude in decimal degrees, positive=East.
            Converted from NMEA's DDDMM.MMMM format. None if the value or
            hemisphere field is empty or invalid.

        fix_quality: Fix quality indicator. Unrecognized codes decode to
            FixQuality.UNKNOWN; None only if the field was empty.

        num_satellites: Number of satellites used in the fix solution.
            None if field was empty or not an integer in 0-255.

        horizontal_dilution_of_precision: HDOP value indicating position
            accuracy. Lower is better. None if field was empty.

        altitude_meters: Antenna altitude above mean sea level (MSL).
            None if field was empty.

        geoid_separation_meters: Height of geoid (MSL) above WGS84 ellipsoid.
            ellipsoid_height = altitude_meters + geoid_separation_meters.
            None if field was empty.

        differential_age_seconds: Age of the differential correction data.
            None when no differential correction is in use.

        differential_station_id: Reference station ID (0-65535).
            None when no differential correction is in use.

    Example:
        >>> gga = parse_gga("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")
        >>> gga.fix_quality
        <FixQuality.GPS: 1>
        >>> gga.latitude_degrees
        48.1173
        >>> gga.valid
        True
    """

    time: GPSTime | None = None
    latitude_degrees: float | None = None
    longitude_degrees: float | None = None
    fix_quality: FixQuality | None = None
    num_satellites: int | None = None
    horizontal_dilution_of_precision: float | None = None
    altitude_meters: float | None = None
    geoid_separation_meters: float | None = None
    differential_age_seconds: float | None = None
    differential_station_id: int | None = None

    @property
    def valid(self) -> bool:
        """True only if the receiver reports a fix."""
        return self.fix_quality is not None and self.fix_quality != FixQuality.INVALID


@dataclass(frozen=True)
class ZDAData:
    """Decoded ZDA (Time & Date) sentence.

    Attributes:
        time: UTC time of day.
        date: UTC date. Present only if day, month and year all decoded.
        zone_hours: Local zone offset in hours, -13 to 13.
        zone_minutes: Local zone offset minutes, 0-59.
    """

    time: GPSTime | None = None
    date: GPSDate | None = None
    zone_hours: int | None = None
    zone_minutes: int | None = None


@dataclass(frozen=True)
class RMCData:
    """Decoded RMC (Recommended Minimum Navigation Information) sentence.

    Attributes:
        time: UTC time of the fix.

        status: ACTIVE or VOID. None for any other status letter.

        latitude_degrees: Latitude in decimal degrees, positive=North.

        longitude_degrees: Longitude in decimal degrees, positive=East.

        speed_over_ground_knots: Ground speed in knots.

        course_over_ground_degrees: Track made good relative to true north.

        date: UTC date from the DDMMYY field. The two-digit year is
            offset by the configured century (1900 unless overridden).

        magnetic_variation_degrees: Magnetic variation, positive=East,
            negative=West.

    Example:
        >>> rmc = parse_rmc("$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A")
        >>> rmc.status
        <RMCStatus.ACTIVE: 'A'>
        >>> rmc.magnetic_variation_degrees
        -3.1
    """

    time: GPSTime | None = None
    status: RMCStatus | None = None
    latitude_degrees: float | None = None
    longitude_degrees: float | None = None
    speed_over_ground_knots: float | None = None
    course_over_ground_degrees: float | None = None
    date: GPSDate | None = None
    magnetic_variation_degrees: float | None = None

    @property
    def valid(self) -> bool:
        """True only if the receiver marks the data as active."""
        return self.status is RMCStatus.ACTIVE
