"""Tests for GLL sentence decoding."""

from navfix import FixRecord
from navfix.nmea.gll import decode_gll


class TestDecodeGLL:
    """Tests for decode_gll function."""

    def test_valid_gll(self):
        fix = FixRecord()
        assert decode_gll("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D", fix) is True
        assert fix.latitude == 4916.45
        assert fix.latitude_is_north is True
        assert fix.longitude == 12311.12
        assert fix.longitude_is_east is False
        assert fix.valid is True

    def test_void_status(self):
        fix = FixRecord(valid=True)
        assert decode_gll("$GAGLL,3356.123,S,15112.456,W,081836.00,V,A*66", fix) is True
        assert fix.valid is False
        assert fix.latitude_is_north is False

    def test_only_position_and_validity_written(self):
        fix = FixRecord(satellite_count=9, speed_kph=1.0)
        decode_gll("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D", fix)
        assert fix.satellite_count == 9
        assert fix.speed_kph == 1.0
        assert fix.utc_timestamp == 0

    def test_legacy_gll_without_status_is_rejected(self):
        fix = FixRecord()
        assert decode_gll("$GPGLL,4916.45,N,12311.12,W*71", fix) is False
        assert fix == FixRecord()
