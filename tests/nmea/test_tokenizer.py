"""Tests for NMEA sentence tokenizing."""

from navfix import tokenize

RMC = "$GPRMC,091724.00,A,5630.7930,N,08459.3424,E,06.404,075.5,260214,,,A*69"
RMC_FIELDS = [
    "$GPRMC", "091724.00", "A", "5630.7930", "N", "08459.3424",
    "E", "06.404", "075.5", "260214", "", "", "A*69",
]


class TestTokenize:
    """Tests for tokenize function."""

    def test_comma_only_keeps_checksum_in_last_field(self):
        assert tokenize(RMC, ",") == RMC_FIELDS

    def test_default_delimiters_split_checksum(self):
        assert tokenize(RMC) == RMC_FIELDS[:-1] + ["A", "69"]

    def test_empty_fields_are_preserved(self):
        assert tokenize("$GPVTG,,T,,M*3D") == ["$GPVTG", "", "T", "", "M", "3D"]

    def test_consecutive_delimiters_at_end(self):
        assert tokenize("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D")[-2:] == ["", "1D"]

    def test_no_delimiters_returns_whole_string(self):
        assert tokenize("$GPGGA") == ["$GPGGA"]

    def test_empty_string(self):
        assert tokenize("") == [""]

    def test_empty_delimiter_set(self):
        assert tokenize("a,b", "") == ["a,b"]

    def test_regex_metacharacters_are_literal(self):
        assert tokenize("a.b]c", ".]") == ["a", "b", "c"]
