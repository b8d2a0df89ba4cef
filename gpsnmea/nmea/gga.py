"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,3.2,0120*hh
           |      |        | |         | | |  |   |     | |    | |   |
           |      |        | |         | | |  |   |     | |    | |   +-- DGPS station ID
           |      |        | |         | | |  |   |     | |    | +-- DGPS age (seconds)
           |      |        | |         | | |  |   |     | +----+-- Geoid separation + unit (skipped)
           |      |        | |         | | |  |   +-----+-- Altitude above MSL + unit (skipped)
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality
           |      |        | +---------+-- Longitude + E/W
           |      +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

A GGA sentence has exactly 14 commas. Any other count means fields have
been dropped or added, and every position after the damage would be
misread, so such a sentence decodes to a GGAData with all attributes None.

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    other = Unknown
"""

import logging

from gpsnmea.nmea.fields import (
    parse_fix_quality,
    parse_float_field,
    parse_int_field,
    parse_latitude,
    parse_longitude,
    parse_time,
)
from gpsnmea.nmea.sentence import SentenceKind, ValidatedSentence, frame
from gpsnmea.nmea.types import GGAData

__all__ = ["decode_gga", "parse_gga"]

logger = logging.getLogger(__name__)

_EXPECTED_COMMA_COUNT = 14

_MAX_SATELLITES = 255
_MAX_STATION_ID = 65535


def _accepts(sentence: ValidatedSentence) -> bool:
    """Check the kind tag and the exact comma count."""
    if sentence.kind is not SentenceKind.GPGGA:
        logger.debug("Not a GGA sentence: %s", sentence.identifier)
        return False
    if sentence.comma_count != _EXPECTED_COMMA_COUNT:
        logger.debug(
            "GGA sentence has %d commas, expected %d",
            sentence.comma_count,
            _EXPECTED_COMMA_COUNT,
        )
        return False
    return True


def _build_gga_data(fields: list[str]) -> GGAData:
    """Construct a GGAData object from split fields.

    Maps NMEA field indices to GGAData attributes:
        fields[1]  -> time (HHMMSS.ss format)
        fields[2]  -> latitude (DDMM.MMMM format)
        fields[3]  -> latitude direction (N/S)
        fields[4]  -> longitude (DDDMM.MMMM format)
        fields[5]  -> longitude direction (E/W)
        fields[6]  -> fix_quality
        fields[7]  -> num_satellites
        fields[8]  -> HDOP (horizontal dilution of precision)
        fields[9]  -> altitude above MSL (meters)
        fields[10] -> altitude unit, skipped
        fields[11] -> geoid separation (meters)
        fields[12] -> geoid separation unit, skipped
        fields[13] -> age of differential data (seconds)
        fields[14] -> differential reference station ID

    Args:
        fields: Payload split on commas, exactly 15 elements

    Returns:
        GGAData with each attribute decoded independently
    """
    return GGAData(
        time=parse_time(fields[1]),
        latitude_degrees=parse_latitude(fields[2], fields[3]),
        longitude_degrees=parse_longitude(fields[4], fields[5]),
        fix_quality=parse_fix_quality(fields[6]),
        num_satellites=parse_int_field(fields[7], 0, _MAX_SATELLITES),
        horizontal_dilution_of_precision=parse_float_field(fields[8]),
        altitude_meters=parse_float_field(fields[9]),
        geoid_separation_meters=parse_float_field(fields[11]),
        differential_age_seconds=parse_float_field(fields[13]),
        differential_station_id=parse_int_field(fields[14], 0, _MAX_STATION_ID),
    )


def decode_gga(sentence: ValidatedSentence) -> GGAData:
    """Decode a framed GGA sentence.

    Never raises. If the sentence is not a GPGGA sentence or does not have
    exactly 14 commas, every attribute of the result is None.

    Args:
        sentence: Output of ``frame()``

    Returns:
        GGAData; individual attributes are None where their field was
        empty or malformed

    Example:
        >>> gga = decode_gga(frame("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"))
        >>> gga.num_satellites
        8
        >>> gga.differential_station_id is None
        True
    """
    if not _accepts(sentence):
        return GGAData()
    return _build_gga_data(sentence.fields)


def parse_gga(text: str) -> GGAData:
    """Frame and decode a raw GGA sentence.

    Raises:
        NMEAError: If ``text`` cannot be framed (see ``frame()``).
    """
    return decode_gga(frame(text))
