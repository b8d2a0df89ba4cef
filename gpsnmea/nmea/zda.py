"""ZDA sentence decoder.

ZDA (Time & Date) carries UTC time, the full date with a four-digit year,
and the local time zone offset:

    $GPZDA,201530.00,04,07,2002,00,00*60
           |         |  |  |    |  +-- Local zone minutes
           |         |  |  |    +-- Local zone hours (-13..13)
           |         +--+--+-- Day, month, year
           +-- UTC time (HHMMSS.ss)
"""

import logging

from gpsnmea.nmea.fields import parse_int_field, parse_time
from gpsnmea.nmea.sentence import SentenceKind, ValidatedSentence, frame
from gpsnmea.nmea.types import GPSDate, ZDAData

__all__ = ["decode_zda", "parse_zda"]

logger = logging.getLogger(__name__)

_EXPECTED_COMMA_COUNT = 6

_MAX_ZONE_HOURS = 13
_MAX_ZONE_MINUTES = 59


def _build_date(day: str, month: str, year: str) -> GPSDate | None:
    """Combine the three date fields; None unless all of them decode."""
    parsed_day = parse_int_field(day)
    parsed_month = parse_int_field(month)
    parsed_year = parse_int_field(year, minimum=0)
    if parsed_day is None or parsed_month is None or parsed_year is None:
        return None
    try:
        return GPSDate(year=parsed_year, month=parsed_month, day=parsed_day)
    except ValueError:
        return None


def _accepts(sentence: ValidatedSentence) -> bool:
    """Check the kind tag and the exact comma count."""
    if sentence.kind is not SentenceKind.GPZDA:
        logger.debug("Not a ZDA sentence: %s", sentence.identifier)
        return False
    if sentence.comma_count != _EXPECTED_COMMA_COUNT:
        logger.debug(
            "ZDA sentence has %d commas, expected %d",
            sentence.comma_count,
            _EXPECTED_COMMA_COUNT,
        )
        return False
    return True


def decode_zda(sentence: ValidatedSentence) -> ZDAData:
    """Decode a framed ZDA sentence.

    Never raises. A sentence that is not GPZDA, or that does not have
    exactly 6 commas, yields a ZDAData with every attribute None.
    """
    if not _accepts(sentence):
        return ZDAData()

    fields = sentence.fields
    return ZDAData(
        time=parse_time(fields[1]),
        date=_build_date(fields[2], fields[3], fields[4]),
        zone_hours=parse_int_field(fields[5], -_MAX_ZONE_HOURS, _MAX_ZONE_HOURS),
        zone_minutes=parse_int_field(fields[6], 0, _MAX_ZONE_MINUTES),
    )


def parse_zda(text: str) -> ZDAData:
    """Frame and decode a raw ZDA sentence; framing errors propagate."""
    return decode_zda(frame(text))
