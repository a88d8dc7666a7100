"""Tests for sentence dispatch and the decode entry point."""

import pytest

from navfix import FixRecord, SentenceDecoder, SentenceType, decode, knots_to_kph, tokenize
from navfix.nmea import DISPATCH_TABLE

RMC = "$GPRMC,091724.00,A,5630.7930,N,08459.3424,E,06.404,075.5,260214,,,A*69"
GGA = "$GPGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*61"
GLL = "$GPGLL,4916.45,N,12311.12,W,225444,A,*1D"
GSA = "$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39"
GSV = "$GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75"
VTG = "$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25"

SENTENCES = [
    (RMC, SentenceType.POSITION_VELOCITY, 13),
    (GGA, SentenceType.FIX_QUALITY, 16),
    (GLL, SentenceType.LAT_LON_FIX, 8),
    (GSA, SentenceType.SATELLITE_GEOMETRY_QUALITY, 19),
    (GSV, SentenceType.SATELLITE_VISIBILITY, 8),
    (VTG, SentenceType.GROUND_SPEED_VECTOR, 10),
]


def _populated_fix() -> FixRecord:
    """A record with every field away from its default, to detect writes."""
    return FixRecord(
        valid=True,
        latitude=1111.11,
        latitude_is_north=False,
        longitude=2222.22,
        longitude_is_east=False,
        altitude_meters=333.0,
        speed_kph=44.0,
        heading_degrees=55.0,
        horizontal_dilution=6.6,
        vertical_dilution=7.7,
        satellite_count=88,
        utc_timestamp=999,
    )


class TestDecode:
    """Tests for decode function."""

    def test_rmc_example(self, pinned_timezone):
        sentence_type, fix = decode(RMC)
        assert sentence_type is SentenceType.POSITION_VELOCITY
        assert fix.valid is True
        assert fix.latitude == 5630.793
        assert fix.latitude_is_north is True
        assert fix.longitude == 8459.3424
        assert fix.longitude_is_east is True
        assert fix.altitude_meters == 0.0
        assert fix.speed_kph == knots_to_kph(6.404)
        assert fix.heading_degrees == 75.5
        assert fix.horizontal_dilution == 99.0
        assert fix.vertical_dilution == 99.0
        assert fix.satellite_count == 0
        assert fix.utc_timestamp == 1393381044

    def test_rmc_example_utc(self):
        _, fix = decode(RMC, local_time=False)
        assert fix.utc_timestamp == 1393406244

    @pytest.mark.parametrize(("sentence", "expected", "_minimum"), SENTENCES)
    def test_each_sentence_type(self, sentence, expected, _minimum):
        sentence_type, _ = decode(sentence)
        assert sentence_type is expected

    def test_caller_record_updated_in_place(self):
        fix = FixRecord()
        _, returned = decode(GGA, fix)
        assert returned is fix
        assert fix.satellite_count == 8

    def test_fresh_record_when_omitted(self):
        _, first = decode(GSA)
        _, second = decode(GSV)
        assert first is not second
        assert second.horizontal_dilution == 99.0

    def test_fields_accumulate_across_sentence_types(self):
        fix = FixRecord()
        decode(RMC, fix, local_time=False)
        decode(GGA, fix)
        decode(GSA, fix)
        assert fix.valid is True
        assert fix.heading_degrees == 75.5
        assert fix.utc_timestamp == 1393406244
        assert fix.latitude == 4807.038
        assert fix.altitude_meters == pytest.approx(545.4)
        assert fix.horizontal_dilution == pytest.approx(1.3)
        assert fix.vertical_dilution == pytest.approx(2.1)

    @pytest.mark.parametrize("talker", ["GP", "GL", "GN", "GA"])
    def test_supported_talkers(self, talker):
        sentence_type, fix = decode(GGA.replace("$GP", f"${talker}", 1))
        assert sentence_type is SentenceType.FIX_QUALITY
        assert fix.satellite_count == 8

    @pytest.mark.parametrize("talker", ["GB", "GQ", "XX", "BD"])
    def test_unsupported_talker(self, talker):
        fix = _populated_fix()
        sentence_type, returned = decode(GGA.replace("$GP", f"${talker}", 1), fix)
        assert sentence_type is SentenceType.UNRECOGNIZED_ERROR
        assert returned == _populated_fix()

    def test_unknown_sentence_code(self):
        fix = _populated_fix()
        sentence_type, _ = decode("$GPZDA,201530.00,04,07,2002,00,00*60", fix)
        assert sentence_type is SentenceType.UNRECOGNIZED_ERROR
        assert fix == _populated_fix()

    def test_missing_dollar_sign(self):
        sentence_type, fix = decode(GGA[1:])
        assert sentence_type is SentenceType.UNRECOGNIZED_ERROR
        assert fix == FixRecord()

    def test_empty_sentence(self):
        sentence_type, _ = decode("")
        assert sentence_type is SentenceType.UNRECOGNIZED_ERROR

    def test_checksum_is_not_verified(self):
        sentence_type, fix = decode(GGA[:-2] + "00")
        assert sentence_type is SentenceType.FIX_QUALITY
        assert fix.satellite_count == 8

    @pytest.mark.parametrize(("sentence", "_expected", "minimum"), SENTENCES)
    def test_short_sentences_leave_record_unmodified(self, sentence, _expected, minimum):
        fields = sentence.split(",")
        for count in range(1, len(fields)):
            truncated = ",".join(fields[:count])
            if len(tokenize(truncated)) >= minimum:
                continue
            fix = _populated_fix()
            sentence_type, _ = decode(truncated, fix)
            assert sentence_type is SentenceType.UNRECOGNIZED_ERROR, truncated
            assert fix == _populated_fix(), truncated


class TestSentenceDecoder:
    def test_utc_configuration(self):
        sentence_type, fix = SentenceDecoder(local_time=False).decode(RMC)
        assert sentence_type is SentenceType.POSITION_VELOCITY
        assert fix.utc_timestamp == 1393406244

    def test_local_configuration(self, pinned_timezone):
        _, fix = SentenceDecoder().decode(RMC)
        assert fix.utc_timestamp == 1393381044

    def test_dispatch_table_codes(self):
        assert set(DISPATCH_TABLE) == {"RMC", "GGA", "GLL", "GSA", "GSV", "VTG"}

    @pytest.mark.parametrize("code", sorted(DISPATCH_TABLE))
    def test_decoders_are_documented(self, code):
        _, decoder = DISPATCH_TABLE[code]
        assert decoder.__doc__
