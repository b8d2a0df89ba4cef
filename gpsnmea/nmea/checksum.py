"""NMEA checksum extraction and verification.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all bytes between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'. Either
letter case is accepted for the hex digits.

Example sentence structure:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
    ^                         checksum content                   ^^
    start                                                     checksum (0x47 = 71)

The sentence may be surrounded by arbitrary text. Only the first '$' and
the first '*' after it are significant.
"""

import string

__all__ = [
    "calculate_checksum",
    "extract_checksum_parts",
    "parse_checksum_digits",
    "validate_checksum",
]

_START_DELIMITER = "$"
_CHECKSUM_DELIMITER = "*"
_CHECKSUM_LENGTH = 2


def extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload content and provided checksum from an NMEA sentence.

    NMEA sentences follow the format: $<content>*<checksum>
    This function separates these components without judging them; the
    caller decides whether an empty payload or a short checksum is an error.

    Args:
        sentence: Raw text containing an NMEA sentence (e.g., "noise$GPZDA,...*60\\r\\n")

    Returns:
        A tuple of (content, checksum_text), or None if there is no '$'.
        ``content`` runs up to the first '*' after the '$', or to the end of
        the text when there is no '*'. ``checksum_text`` holds at most the two
        characters following the '*' and is empty when the '*' is missing.

    Example:
        >>> extract_checksum_parts("xx$GPZDA,201530.00*7F\\r\\n")
        ('GPZDA,201530.00', '7F')
        >>> extract_checksum_parts("$GPZDA,201530.00")
        ('GPZDA,201530.00', '')
    """
    start = sentence.find(_START_DELIMITER)
    if start == -1:
        return None

    start += 1
    end = sentence.find(_CHECKSUM_DELIMITER, start)
    if end == -1:
        return sentence[start:], ""

    content = sentence[start:end]
    provided = sentence[end + 1 : end + 1 + _CHECKSUM_LENGTH]
    return content, provided


def parse_checksum_digits(digits: str) -> int | None:
    """Decode the two hex digits that follow '*'.

    ``int(x, 16)`` alone would also accept signs, whitespace and
    underscores, so every character is checked explicitly.

    Args:
        digits: Text found after the '*' delimiter

    Returns:
        Checksum byte (0-255), or None if ``digits`` is not exactly two
        hexadecimal characters

    Example:
        >>> parse_checksum_digits("6a")
        106
        >>> parse_checksum_digits("+F")
        None
    """
    if len(digits) != _CHECKSUM_LENGTH:
        return None
    if not all(character in string.hexdigits for character in digits):
        return None
    return int(digits, 16)


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs every byte of the content. NMEA is
    ASCII, where a character is a byte; other characters contribute their
    UTF-8 bytes. Undecodable input bytes carried as lone surrogates
    (``errors="surrogateescape"``) contribute the original raw byte.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        For content "GPGGA", the calculation is:
        ord('G') ^ ord('P') ^ ord('G') ^ ord('G') ^ ord('A') = 0x56
    """
    try:
        data = content.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        # Surrogates outside U+DC80..U+DCFF do not map back to a single byte
        data = content.encode("utf-8", errors="surrogatepass")

    result = 0
    for byte in data:
        result ^= byte
    return result


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Extracting the content between '$' and '*'
    2. Computing the XOR of all content bytes
    3. Comparing against the provided 2-digit hex checksum

    This is the boolean form of ``frame()``: it returns True exactly when
    ``frame(sentence)`` would succeed.

    Args:
        sentence: Text containing a complete NMEA sentence including '$',
                  '*' and checksum. Surrounding text such as a trailing
                  "\\r\\n" is ignored.

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing '$' or empty content)
        - Checksum is missing, truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPZDA,201530.00,04,07,2002,00,00*60")
        True
        >>> validate_checksum("$GPZDA,201530.00,04,07,2002,00,00*FF")
        False
    """
    parts = extract_checksum_parts(sentence)
    if parts is None:
        return False

    content, provided = parts
    if not content:
        return False

    expected = parse_checksum_digits(provided)
    if expected is None:
        return False

    return calculate_checksum(content) == expected
