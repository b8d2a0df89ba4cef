"""Exceptions raised when an NMEA sentence cannot be framed or trusted.

Only the framer raises. Field and record decoders degrade to ``None``
attributes instead, so catching ``NMEAError`` around ``frame()`` is the
single place a caller needs to handle bad input.
"""

__all__ = [
    "ChecksumMismatchError",
    "EmptySentenceError",
    "InvalidChecksumFormatError",
    "NMEAError",
]


class NMEAError(ValueError):
    """Base class for sentences that must not be decoded.

    Args:
        message: Human readable reason.
        sentence: The raw text that was rejected.
    """

    def __init__(self, message: str, sentence: str) -> None:
        super().__init__(message)
        self.sentence = sentence


class EmptySentenceError(NMEAError):
    """No ``$`` was found, or nothing lies between ``$`` and ``*``."""


class InvalidChecksumFormatError(NMEAError):
    """The two characters after ``*`` are missing or are not hex digits."""


class ChecksumMismatchError(NMEAError):
    """The declared checksum does not match the XOR of the payload.

    Attributes:
        expected: Checksum byte declared after ``*``.
        actual: Checksum byte computed over the payload.
    """

    def __init__(self, sentence: str, expected: int, actual: int) -> None:
        super().__init__(
            f"checksum mismatch: declared 0x{expected:02X}, "
            f"computed 0x{actual:02X}",
            sentence,
        )
        self.expected = expected
        self.actual = actual
