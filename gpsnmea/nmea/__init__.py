"""NMEA 0183 decoder for GGA, ZDA and RMC sentences."""

from gpsnmea.nmea.checksum import calculate_checksum, validate_checksum
from gpsnmea.nmea.decoder import NMEARecord, decode, decode_sentence, iter_records
from gpsnmea.nmea.errors import (
    ChecksumMismatchError,
    EmptySentenceError,
    InvalidChecksumFormatError,
    NMEAError,
)
from gpsnmea.nmea.gga import decode_gga, parse_gga
from gpsnmea.nmea.rmc import decode_rmc, parse_rmc
from gpsnmea.nmea.sentence import SentenceKind, ValidatedSentence, frame
from gpsnmea.nmea.types import (
    FixQuality,
    GGAData,
    GPSDate,
    GPSTime,
    RMCData,
    RMCStatus,
    ZDAData,
)
from gpsnmea.nmea.zda import decode_zda, parse_zda

__all__ = [
    "ChecksumMismatchError",
    "EmptySentenceError",
    "FixQuality",
    "GGAData",
    "GPSDate",
    "GPSTime",
    "InvalidChecksumFormatError",
    "NMEAError",
    "NMEARecord",
    "RMCData",
    "RMCStatus",
    "SentenceKind",
    "ValidatedSentence",
    "ZDAData",
    "calculate_checksum",
    "decode",
    "decode_gga",
    "decode_rmc",
    "decode_sentence",
    "decode_zda",
    "frame",
    "iter_records",
    "parse_gga",
    "parse_rmc",
    "parse_zda",
    "validate_checksum",
]
