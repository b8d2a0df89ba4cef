"""Tests for ZDA sentence decoding."""

import pytest

from gpsnmea import GPSDate, GPSTime, ZDAData, decode_zda, frame, parse_zda

ZDA_VALID = "$GPZDA,201530.00,04,07,2002,00,00*60"


class TestParseZDA:
    """Tests for parse_zda function."""

    def test_valid_zda(self):
        result = parse_zda(ZDA_VALID)
        assert result.time == GPSTime(20, 15, 30.0)
        assert result.date == GPSDate(year=2002, month=7, day=4)
        assert result.zone_hours == 0
        assert result.zone_minutes == 0

    def test_four_digit_year_is_used_as_is(self):
        result = parse_zda("$GPZDA,235959.99,31,12,1999,-13,45*40")
        assert result.date == GPSDate(year=1999, month=12, day=31)
        assert result.time.seconds == pytest.approx(59.99)
        assert result.zone_hours == -13
        assert result.zone_minutes == 45

    def test_missing_year_drops_date(self):
        result = parse_zda("$GPZDA,201530.00,04,07,,-05,30*4B")
        assert result.date is None
        assert result.time == GPSTime(20, 15, 30.0)
        assert result.zone_hours == -5
        assert result.zone_minutes == 30

    def test_invalid_month_drops_date(self):
        result = parse_zda("$GPZDA,201530.00,04,13,2002,00,00*65")
        assert result.date is None
        assert result.time == GPSTime(20, 15, 30.0)

    def test_wrong_comma_count(self):
        assert parse_zda("$GPZDA,201530.00,04,07,2002,00*4C") == ZDAData()

    def test_wrong_sentence_type(self):
        sentence = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"
        assert parse_zda(sentence) == ZDAData()


class TestDecodeZDA:
    """Tests for decode_zda on framed sentences."""

    def test_decode_framed(self):
        assert decode_zda(frame(ZDA_VALID)).date.to_date().isoformat() == "2002-07-04"
