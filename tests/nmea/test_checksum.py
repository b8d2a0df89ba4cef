"""Tests for NMEA checksum calculation and validation."""

from gpsnmea import calculate_checksum, validate_checksum
from gpsnmea.nmea.checksum import extract_checksum_parts, parse_checksum_digits

GGA_VALID = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
RMC_VALID = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


class TestCalculateChecksum:
    """Tests for calculate_checksum function."""

    def test_known_sentence(self):
        payload = GGA_VALID[1:GGA_VALID.index("*")]
        assert calculate_checksum(payload) == 0x47

    def test_empty_fields_gga(self):
        payload = "GPGGA,,,,,,,,,,,,,"
        assert payload.count(",") == 13
        expected = 0
        for character in "GPGGA" + "," * 13:
            expected ^= ord(character)
        assert calculate_checksum(payload) == expected == 0x7A

    def test_escaped_raw_byte(self):
        content = b"GPRMC,\xff".decode("ascii", errors="surrogateescape")
        assert calculate_checksum(content) == 0x98

    def test_empty_content(self):
        assert calculate_checksum("") == 0


class TestExtractChecksumParts:
    """Tests for extract_checksum_parts function."""

    def test_surrounding_noise(self):
        assert extract_checksum_parts("xx$GPZDA,1*7F\r\n") == ("GPZDA,1", "7F")

    def test_missing_asterisk(self):
        assert extract_checksum_parts("$GPZDA,1") == ("GPZDA,1", "")

    def test_missing_dollar(self):
        assert extract_checksum_parts("GPZDA,1*7F") is None

    def test_asterisk_before_dollar_is_ignored(self):
        assert extract_checksum_parts("*00$GPZDA,1*7F") == ("GPZDA,1", "7F")


class TestParseChecksumDigits:
    """Tests for parse_checksum_digits function."""

    def test_uppercase(self):
        assert parse_checksum_digits("6A") == 0x6A

    def test_lowercase(self):
        assert parse_checksum_digits("6a") == 0x6A

    def test_truncated(self):
        assert parse_checksum_digits("6") is None

    def test_not_hex(self):
        assert parse_checksum_digits("G1") is None

    def test_sign_and_whitespace_rejected(self):
        assert parse_checksum_digits("+F") is None
        assert parse_checksum_digits(" F") is None


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_gga_checksum(self):
        assert validate_checksum(GGA_VALID) is True

    def test_valid_checksum_with_newline(self):
        assert validate_checksum(GGA_VALID + "\r\n") is True

    def test_valid_lowercase_checksum(self):
        assert validate_checksum(RMC_VALID[:-2] + "6a") is True

    def test_invalid_checksum(self):
        sentence = GGA_VALID[:-2] + "FF"
        assert validate_checksum(sentence) is False

    def test_missing_dollar_sign(self):
        assert validate_checksum(GGA_VALID[1:]) is False

    def test_missing_asterisk(self):
        sentence = GGA_VALID.replace("*", "")
        assert validate_checksum(sentence) is False

    def test_empty_string(self):
        assert validate_checksum("") is False

    def test_empty_payload(self):
        assert validate_checksum("$*00") is False

    def test_truncated_checksum(self):
        assert validate_checksum(GGA_VALID[:-1]) is False

    def test_escaped_raw_byte_returns_bool(self):
        line = b"$GPRMC,\xff*00".decode("ascii", errors="surrogateescape")
        assert validate_checksum(line) is False

    def test_valid_rmc_checksum(self):
        assert validate_checksum(RMC_VALID) is True
