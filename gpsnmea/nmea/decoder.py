"""Dispatch framed sentences to the decoder for their kind.

Decoding a stream of receiver output is a two-step loop: frame each line,
then decode it by kind. Lines come from whatever the caller reads (a file,
a serial port, a socket); this module only sees strings.

Example::

    with open("track.nmea", encoding="ascii", errors="replace") as log:
        for record in iter_records(log):
            if isinstance(record, RMCData) and record.valid:
                print(record.latitude_degrees, record.longitude_degrees)
"""

import logging
from collections.abc import Iterable, Iterator

from gpsnmea.nmea.errors import NMEAError
from gpsnmea.nmea.fields import DEFAULT_CENTURY
from gpsnmea.nmea.gga import decode_gga
from gpsnmea.nmea.rmc import decode_rmc
from gpsnmea.nmea.sentence import SentenceKind, ValidatedSentence, frame
from gpsnmea.nmea.types import GGAData, RMCData, ZDAData
from gpsnmea.nmea.zda import decode_zda

__all__ = ["NMEARecord", "decode", "decode_sentence", "iter_records"]

logger = logging.getLogger(__name__)

NMEARecord = GGAData | ZDAData | RMCData


def decode(
    sentence: ValidatedSentence,
    century: int = DEFAULT_CENTURY,
) -> NMEARecord | None:
    """Decode a framed sentence with the decoder matching its kind.

    Args:
        sentence: Output of ``frame()``
        century: Passed to the RMC date decoder

    Returns:
        GGAData, ZDAData or RMCData, or None for ``SentenceKind.UNKNOWN``
    """
    if sentence.kind is SentenceKind.GPGGA:
        return decode_gga(sentence)
    if sentence.kind is SentenceKind.GPZDA:
        return decode_zda(sentence)
    if sentence.kind is SentenceKind.GPRMC:
        return decode_rmc(sentence, century)
    return None


def decode_sentence(
    text: str,
    century: int = DEFAULT_CENTURY,
) -> NMEARecord | None:
    """Frame ``text`` and decode it by kind.

    Raises:
        NMEAError: If ``text`` cannot be framed.
    """
    return decode(frame(text), century)


def iter_records(
    lines: Iterable[str],
    century: int = DEFAULT_CENTURY,
) -> Iterator[NMEARecord]:
    """Yield a record for every decodable line.

    Lines that fail framing, and sentences of an unknown kind, are logged
    at DEBUG and skipped; they never stop the iteration.

    Args:
        lines: Candidate sentences, one per item; line endings are allowed
        century: Passed to the RMC date decoder

    Yields:
        GGAData, ZDAData or RMCData in input order
    """
    for line in lines:
        try:
            sentence = frame(line)
        except NMEAError as e:
            logger.debug("Skipping line (%s): %r", type(e).__name__, line)
            continue

        record = decode(sentence, century)
        if record is None:
            logger.debug("Skipping unsupported sentence: %s", sentence.identifier)
            continue
        yield record
