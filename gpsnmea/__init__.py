"""Decoding of NMEA 0183 GPS sentences into typed records."""

from gpsnmea.nmea import (
    ChecksumMismatchError,
    EmptySentenceError,
    FixQuality,
    GGAData,
    GPSDate,
    GPSTime,
    InvalidChecksumFormatError,
    NMEAError,
    NMEARecord,
    RMCData,
    RMCStatus,
    SentenceKind,
    ValidatedSentence,
    ZDAData,
    calculate_checksum,
    decode,
    decode_gga,
    decode_rmc,
    decode_sentence,
    decode_zda,
    frame,
    iter_records,
    parse_gga,
    parse_rmc,
    parse_zda,
    validate_checksum,
)

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
