"""RMC sentence decoder.

RMC (Recommended Minimum Navigation Information) combines position, velocity
and date in one sentence, which makes it the usual choice when only a single
sentence type can be enabled on the receiver.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Course over ground (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS.ss)

NMEA 2.3 and later append a mode indicator after the magnetic variation,
so RMC requires at least 11 commas rather than an exact count. Fields past
the eleventh are ignored.
"""

import logging

from gpsnmea.nmea.fields import (
    DEFAULT_CENTURY,
    parse_date,
    parse_float_field,
    parse_latitude,
    parse_longitude,
    parse_magnetic_variation,
    parse_rmc_status,
    parse_time,
)
from gpsnmea.nmea.sentence import SentenceKind, ValidatedSentence, frame
from gpsnmea.nmea.types import RMCData

__all__ = ["decode_rmc", "parse_rmc"]

logger = logging.getLogger(__name__)

_MINIMUM_COMMA_COUNT = 11


def _accepts(sentence: ValidatedSentence) -> bool:
    """Check the kind tag and the minimum comma count."""
    if sentence.kind is not SentenceKind.GPRMC:
        logger.debug("Not an RMC sentence: %s", sentence.identifier)
        return False
    if sentence.comma_count < _MINIMUM_COMMA_COUNT:
        logger.debug(
            "RMC sentence has %d commas, expected at least %d",
            sentence.comma_count,
            _MINIMUM_COMMA_COUNT,
        )
        return False
    return True


def _build_rmc_data(fields: list[str], century: int) -> RMCData:
    """Construct an RMCData object from split fields.

    Maps NMEA field indices to RMCData attributes:
        fields[1]      -> time
        fields[2]      -> status (A/V)
        fields[3], [4] -> latitude + N/S
        fields[5], [6] -> longitude + E/W
        fields[7]      -> speed over ground (knots)
        fields[8]      -> course over ground (degrees)
        fields[9]      -> date (DDMMYY)
        fields[10],[11]-> magnetic variation + E/W
    """
    return RMCData(
        time=parse_time(fields[1]),
        status=parse_rmc_status(fields[2]),
        latitude_degrees=parse_latitude(fields[3], fields[4]),
        longitude_degrees=parse_longitude(fields[5], fields[6]),
        speed_over_ground_knots=parse_float_field(fields[7]),
        course_over_ground_degrees=parse_float_field(fields[8]),
        date=parse_date(fields[9], century),
        magnetic_variation_degrees=parse_magnetic_variation(fields[10], fields[11]),
    )


def decode_rmc(
    sentence: ValidatedSentence,
    century: int = DEFAULT_CENTURY,
) -> RMCData:
    """Decode a framed RMC sentence.

    Never raises. A sentence that is not GPRMC, or has fewer than 11
    commas, yields an RMCData with every attribute None.

    Args:
        sentence: Output of ``frame()``
        century: Added to the two-digit year of the date field. The
            default of 1900 maps "230394" to 1994 and "230324" to 1924;
            use 2000 for receivers logging after 1999.

    Returns:
        RMCData; individual attributes are None where their field was
        empty or malformed

    Example:
        >>> rmc = decode_rmc(frame("$GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E*68"))
        >>> rmc.date
        GPSDate(year=1994, month=11, day=19)
        >>> rmc.magnetic_variation_degrees
        20.3
    """
    if not _accepts(sentence):
        return RMCData()
    return _build_rmc_data(sentence.fields, century)


def parse_rmc(text: str, century: int = DEFAULT_CENTURY) -> RMCData:
    """Frame and decode a raw RMC sentence.

    Raises:
        NMEAError: If ``text`` cannot be framed (see ``frame()``).
    """
    return decode_rmc(frame(text), century)
