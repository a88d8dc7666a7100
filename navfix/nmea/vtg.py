"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.
The receiver reports the same speed twice, in knots and in km/h; the knots
value is the one decoded, converted to km/h like the RMC speed so both
sentences produce the same number.

VTG Sentence Format (tokens split on ',' and '*'):
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25
    0      1     2 3     4 5     6 7     8 9 10
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from navfix.nmea.fields import parse_float_field
from navfix.nmea.tokenizer import tokenize
from navfix.nmea.types import FixRecord
from navfix.nmea.units import knots_to_kph

# Tokens 0-8 plus the checksum; the mode indicator is optional
_MINIMUM_TOKEN_COUNT = 10


def decode_vtg(sentence: str, fix: FixRecord) -> bool:
    """Decode a VTG sentence into the fix record (ground speed only).

    Returns:
        False without modifying the record if the sentence has fewer than
        10 tokens, True otherwise
    """
    tokens = tokenize(sentence)
    if len(tokens) < _MINIMUM_TOKEN_COUNT:
        return False

    speed_knots = parse_float_field(tokens[5])
    if speed_knots is not None:
        fix.speed_kph = knots_to_kph(speed_knots)
    return True
