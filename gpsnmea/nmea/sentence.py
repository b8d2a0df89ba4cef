"""Sentence framing: from raw text to a checksum-verified sentence.

Framing is the only step of decoding that can fail hard. A line of text is
accepted as an NMEA sentence when:

    noise $GPRMC,123519,A,...,003.1,W*6A noise
          ^|<------- payload ------->|^^
          |                          |+-- two hex digits, XOR of the payload
          |                          +-- first '*' after the '$'
          +-- first '$' in the text

and the declared checksum equals the XOR of the payload bytes. The text
before the first comma names the talker and sentence type. Identifiers
without a decoder are tagged ``SentenceKind.UNKNOWN`` rather than rejected,
because receivers emit many more sentence types than are decoded here.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from gpsnmea.nmea.checksum import (
    calculate_checksum,
    extract_checksum_parts,
    parse_checksum_digits,
)
from gpsnmea.nmea.errors import (
    ChecksumMismatchError,
    EmptySentenceError,
    InvalidChecksumFormatError,
)

__all__ = ["SentenceKind", "ValidatedSentence", "frame"]

logger = logging.getLogger(__name__)

_FIELD_SEPARATOR = ","


class SentenceKind(Enum):
    """Talker and sentence identifier of a framed sentence."""

    GPGGA = "GPGGA"
    GPRMC = "GPRMC"
    GPZDA = "GPZDA"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_identifier(cls, identifier: str) -> "SentenceKind":
        """Map a five-character identifier such as ``"GPGGA"`` to a kind.

        Never fails: anything that is not a recognized identifier,
        including the literal text ``"UNKNOWN"``, maps to ``UNKNOWN``.
        """
        try:
            return cls(identifier)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class ValidatedSentence:
    """An NMEA sentence whose checksum has been verified.

    Construction recomputes the checksum, so an instance only exists for a
    payload that matches its checksum. ``kind`` is derived from the payload
    and cannot be passed in.

    Attributes:
        payload: Text strictly between '$' and '*', e.g.
            ``"GPZDA,201530.00,04,07,2002,00,00"``.
        checksum: The verified checksum byte (0-255).
        kind: Sentence kind derived from the leading identifier.

    Raises:
        ChecksumMismatchError: If ``checksum`` is not the XOR of ``payload``.
    """

    payload: str
    checksum: int
    kind: SentenceKind = field(init=False)

    def __post_init__(self) -> None:
        actual = calculate_checksum(self.payload)
        if actual != self.checksum:
            raise ChecksumMismatchError(self.payload, self.checksum, actual)
        kind = SentenceKind.from_identifier(self.identifier)
        object.__setattr__(self, "kind", kind)

    @property
    def identifier(self) -> str:
        """Text before the first comma, e.g. ``"GPGGA"``."""
        return self.payload.split(_FIELD_SEPARATOR, 1)[0]

    @property
    def fields(self) -> list[str]:
        """Comma-separated fields, including the identifier at index 0."""
        return self.payload.split(_FIELD_SEPARATOR)

    @property
    def comma_count(self) -> int:
        """Number of field separators in the payload."""
        return self.payload.count(_FIELD_SEPARATOR)


def frame(text: str) -> ValidatedSentence:
    """Locate, verify and classify the NMEA sentence contained in ``text``.

    Args:
        text: One candidate line, possibly with noise before the '$' and
            after the checksum (such as "\\r\\n").

    Returns:
        The verified sentence.

    Raises:
        EmptySentenceError: No '$' in ``text``, or nothing between '$' and '*'.
        InvalidChecksumFormatError: The '*' is missing, or is not followed
            by two hexadecimal digits.
        ChecksumMismatchError: The declared checksum does not match the
            XOR of the payload.

    Example:
        >>> sentence = frame("$GPZDA,201530.00,04,07,2002,00,00*60\\r\\n")
        >>> sentence.kind
        <SentenceKind.GPZDA: 'GPZDA'>
        >>> sentence.payload
        'GPZDA,201530.00,04,07,2002,00,00'
    """
    parts = extract_checksum_parts(text)
    if parts is None or not parts[0]:
        logger.debug("Rejected sentence without payload: %r", text)
        raise EmptySentenceError("no payload between '$' and '*'", text)

    payload, provided = parts
    expected = parse_checksum_digits(provided)
    if expected is None:
        logger.debug("Rejected sentence with bad checksum digits: %r", text)
        raise InvalidChecksumFormatError(
            f"expected two hex digits after '*', got {provided!r}", text
        )

    try:
        return ValidatedSentence(payload=payload, checksum=expected)
    except ChecksumMismatchError as e:
        logger.debug("Rejected sentence with wrong checksum: %r", text)
        raise ChecksumMismatchError(text, e.expected, e.actual) from None
