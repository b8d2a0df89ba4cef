"""End-to-end tests: raw text in, typed records out."""

import logging

import pytest

from gpsnmea import (
    EmptySentenceError,
    FixQuality,
    GGAData,
    GPSDate,
    GPSTime,
    RMCData,
    RMCStatus,
    SentenceKind,
    ZDAData,
    decode,
    decode_sentence,
    frame,
    iter_records,
)

GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
ZDA = "$GPZDA,201530.00,04,07,2002,00,00*60"
RMC = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"
GSV = "$GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74"


class TestDecodeSentence:
    """Tests for decode and decode_sentence."""

    def test_rmc_scenario(self):
        sentence = frame(RMC)
        assert sentence.kind is SentenceKind.GPRMC

        record = decode(sentence)
        assert isinstance(record, RMCData)
        assert record.time == GPSTime(12, 35, 19.0)
        assert record.status is RMCStatus.ACTIVE
        assert record.latitude_degrees == pytest.approx(48.1173, rel=1e-5)
        assert record.longitude_degrees == pytest.approx(11.5167, rel=1e-4)
        assert record.speed_over_ground_knots == pytest.approx(22.4)
        assert record.course_over_ground_degrees == pytest.approx(84.4)
        assert record.date == GPSDate(year=1994, month=3, day=23)
        assert record.magnetic_variation_degrees == pytest.approx(-3.1)

    def test_dispatch_by_kind(self):
        assert isinstance(decode_sentence(GGA), GGAData)
        assert isinstance(decode_sentence(ZDA), ZDAData)
        assert isinstance(decode_sentence(RMC), RMCData)

    def test_unknown_kind(self):
        assert decode_sentence(GSV) is None

    def test_framing_error_propagates(self):
        with pytest.raises(EmptySentenceError):
            decode_sentence("no sentence here")


class TestIterRecords:
    """Tests for iter_records."""

    def test_mixed_stream(self):
        lines = [
            GGA + "\r\n",
            "garbage\r\n",
            GSV + "\r\n",
            RMC[:-2] + "00\r\n",
            ZDA + "\r\n",
            RMC + "\r\n",
        ]
        records = list(iter_records(lines))
        assert [type(record) for record in records] == [GGAData, ZDAData, RMCData]
        assert records[0].fix_quality is FixQuality.GPS

    def test_undecodable_bytes_do_not_stop_iteration(self):
        noisy = b"$GPRMC,\xff*00\r\n".decode("ascii", errors="surrogateescape")
        records = list(iter_records([noisy, RMC]))
        assert len(records) == 1
        assert isinstance(records[0], RMCData)

    def test_century_is_forwarded(self):
        (record,) = iter_records([RMC], century=2000)
        assert record.date.year == 2094

    def test_skipped_lines_are_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="gpsnmea"):
            assert list(iter_records(["garbage", GSV])) == []
        assert "EmptySentenceError" in caplog.text
        assert "GPGSV" in caplog.text
