"""GLL sentence decoder.

GLL (Geographic Position - Latitude/Longitude) carries the position and a
status flag only.

GLL Sentence Format (tokens split on ',' and '*'):
    $GPGLL,4916.45,N,12311.12,W,225444,A,*1D
    0      1       2 3        4 5      6 7 8
           |       | |        | |      | |
           |       | |        | |      | +-- Mode indicator (NMEA 2.3+)
           |       | |        | |      +-- Status (A=active, V=void)
           |       | |        | +-- UTC time (HHMMSS.ss)
           |       | +--------+-- Longitude + E/W
           +-------+-- Latitude + N/S
"""

from navfix.nmea.fields import parse_status_field, update_field, update_position
from navfix.nmea.tokenizer import tokenize
from navfix.nmea.types import FixRecord

_MINIMUM_TOKEN_COUNT = 8


def decode_gll(sentence: str, fix: FixRecord) -> bool:
    """Decode a GLL sentence into the fix record (position and validity)."""
    tokens = tokenize(sentence)
    if len(tokens) < _MINIMUM_TOKEN_COUNT:
        return False

    update_position(fix, tokens, 1)
    update_field(fix, "valid", parse_status_field(tokens[6]))
    return True
