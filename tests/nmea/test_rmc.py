"""Tests for RMC sentence decoding."""

import pytest

from gpsnmea import (
    GPSDate,
    GPSTime,
    InvalidChecksumFormatError,
    RMCData,
    RMCStatus,
    decode_rmc,
    frame,
    parse_rmc,
)

RMC_VALID = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


class TestParseRMC:
    """Tests for parse_rmc function."""

    def test_valid_rmc(self):
        result = parse_rmc(RMC_VALID)
        assert result.time == GPSTime(12, 35, 19.0)
        assert result.status is RMCStatus.ACTIVE
        assert result.latitude_degrees == pytest.approx(48.1173, rel=1e-5)
        assert result.longitude_degrees == pytest.approx(11.5167, rel=1e-4)
        assert result.speed_over_ground_knots == pytest.approx(22.4)
        assert result.course_over_ground_degrees == pytest.approx(84.4)
        assert result.date == GPSDate(year=1994, month=3, day=23)
        assert result.magnetic_variation_degrees == pytest.approx(-3.1)
        assert result.valid is True

    def test_east_variation_west_longitude(self):
        result = parse_rmc("$GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E*68")
        assert result.longitude_degrees == pytest.approx(-(123 + 11.12 / 60))
        assert result.speed_over_ground_knots == pytest.approx(0.5)
        assert result.date == GPSDate(year=1994, month=11, day=19)
        assert result.magnetic_variation_degrees == pytest.approx(20.3)

    def test_mode_indicator_is_accepted(self):
        result = parse_rmc("$GPRMC,092750.000,A,5321.6802,N,00630.3372,W,0.02,31.66,280511,,,A*43")
        assert result.status is RMCStatus.ACTIVE
        assert result.date == GPSDate(year=1911, month=5, day=28)
        assert result.magnetic_variation_degrees is None

    def test_century_override(self):
        sentence = "$GPRMC,092750.000,A,5321.6802,N,00630.3372,W,0.02,31.66,280511,,,A*43"
        assert parse_rmc(sentence, century=2000).date == GPSDate(year=2011, month=5, day=28)

    def test_void_status(self):
        result = parse_rmc("$GPRMC,123519,V,,,,,,,230394,,*33")
        assert result.status is RMCStatus.VOID
        assert result.valid is False
        assert result.latitude_degrees is None
        assert result.speed_over_ground_knots is None
        assert result.date == GPSDate(year=1994, month=3, day=23)

    def test_unknown_status(self):
        result = parse_rmc("$GPRMC,123519,X,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*73")
        assert result.status is None
        assert result.latitude_degrees == pytest.approx(48.1173, rel=1e-5)

    def test_invalid_date_and_variation(self):
        result = parse_rmc("$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,231394,003.1,Q*6D")
        assert result.date is None
        assert result.magnetic_variation_degrees is None
        assert result.course_over_ground_degrees == pytest.approx(84.4)

    def test_too_few_commas(self):
        sentence = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1*11"
        assert parse_rmc(sentence) == RMCData()

    def test_wrong_sentence_type(self):
        assert parse_rmc("$GPZDA,201530.00,04,07,2002,00,00*60") == RMCData()

    def test_truncated_checksum(self):
        with pytest.raises(InvalidChecksumFormatError):
            parse_rmc(RMC_VALID[:-1])


class TestDecodeRMC:
    """Tests for decode_rmc on framed sentences."""

    def test_decode_framed(self):
        sentence = frame(RMC_VALID)
        assert decode_rmc(sentence) == parse_rmc(RMC_VALID)
        assert decode_rmc(sentence, century=2000).date.year == 2094
