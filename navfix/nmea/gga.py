"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) provides the position fix together
with its quality metrics: satellites used, horizontal dilution of precision
and altitude.

GGA Sentence Format (tokens split on ',' and '*'):
    $GPGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*61
    0      1         2        3 4         5 6 7  8   9     10 11  12 13,14 15
           |         |        | |         | | |  |   |     |  |     |
           |         |        | |         | | |  |   |     |  |     +-- DGPS age/station
           |         |        | |         | | |  |   |     |  +-- Geoid height (M=meters)
           |         |        | |         | | |  |   +-----+-- Altitude above MSL
           |         |        | |         | | |  +-- HDOP (horizontal dilution)
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-6)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Only position, satellite count, HDOP and altitude are written to the fix
record. GGA carries no date, so the timestamp is left to RMC.
"""

from navfix.nmea.fields import (
    parse_float_field,
    parse_int_field,
    update_field,
    update_position,
)
from navfix.nmea.tokenizer import tokenize
from navfix.nmea.types import FixRecord

# GGA has 15 fields (indices 0-14) plus the checksum token
_MINIMUM_TOKEN_COUNT = 16


def decode_gga(sentence: str, fix: FixRecord) -> bool:
    """Decode a GGA sentence into the fix record.

    Maps token indices to FixRecord attributes:
        tokens[2..5] -> latitude, N/S, longitude, E/W
        tokens[7]    -> satellite_count
        tokens[8]    -> horizontal_dilution
        tokens[9]    -> altitude_meters

    Returns:
        False without modifying the record if the sentence has fewer than
        16 tokens, True otherwise
    """
    tokens = tokenize(sentence)
    if len(tokens) < _MINIMUM_TOKEN_COUNT:
        return False

    update_position(fix, tokens, 2)
    update_field(fix, "satellite_count", parse_int_field(tokens[7]))
    update_field(fix, "horizontal_dilution", parse_float_field(tokens[8]))
    update_field(fix, "altitude_meters", parse_float_field(tokens[9]))
    return True
