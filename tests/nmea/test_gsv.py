"""Tests for GSV sentence decoding."""

from navfix import FixRecord
from navfix.nmea.gsv import decode_gsv


class TestDecodeGSV:
    """Tests for decode_gsv function."""

    def test_satellites_in_view(self):
        fix = FixRecord()
        sentence = "$GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75"
        assert decode_gsv(sentence, fix) is True
        assert fix.satellite_count == 8

    def test_glonass_gsv_with_missing_snr(self):
        fix = FixRecord()
        sentence = "$GLGSV,1,1,04,65,62,291,32,72,29,042,28,79,48,089,35,88,13,220,*68"
        assert decode_gsv(sentence, fix) is True
        assert fix.satellite_count == 4

    def test_empty_group_is_too_short(self):
        fix = FixRecord(satellite_count=3)
        assert decode_gsv("$GPGSV,1,1,00*79", fix) is False
        assert fix.satellite_count == 3
