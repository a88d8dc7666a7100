"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) describes the satellite geometry behind
the current fix. Only the dilution values are kept.

GSA Sentence Format (tokens split on ',' and '*'):
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
    0      1 2 3-14                  15  16  17  18
           | | |                     |   |   |
           | | |                     |   |   +-- VDOP (vertical dilution)
           | | |                     |   +-- HDOP (horizontal dilution)
           | | |                     +-- PDOP (position dilution)
           | | +-- PRNs of the 12 satellite slots used in the fix
           | +-- Fix type (1=none, 2=2D, 3=3D)
           +-- Selection mode (M=manual, A=automatic)

Dilution of precision is unitless; lower is better. The fix record holds
99.0 until a GGA or GSA sentence reports a value.
"""

from navfix.nmea.fields import parse_float_field, update_field
from navfix.nmea.tokenizer import tokenize
from navfix.nmea.types import FixRecord

_MINIMUM_TOKEN_COUNT = 19


def decode_gsa(sentence: str, fix: FixRecord) -> bool:
    """Decode a GSA sentence into the fix record (HDOP and VDOP)."""
    tokens = tokenize(sentence)
    if len(tokens) < _MINIMUM_TOKEN_COUNT:
        return False

    update_field(fix, "horizontal_dilution", parse_float_field(tokens[16]))
    update_field(fix, "vertical_dilution", parse_float_field(tokens[17]))
    return True
