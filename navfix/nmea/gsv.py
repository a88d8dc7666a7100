"""GSV sentence decoder.

GSV (GNSS Satellites in View) lists up to four satellites per sentence, with
the total number in view repeated in every sentence of the group. Only that
total is kept.

GSV Sentence Format (tokens split on ',' and '*'):
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
    0      1 2 3  4-7         8-11        12-15       16-19       20
           | | |  |
           | | |  +-- Per satellite: PRN, elevation, azimuth, SNR
           | | +-- Total satellites in view
           | +-- Sentence number within the group
           +-- Number of sentences in the group
"""

from navfix.nmea.fields import parse_int_field, update_field
from navfix.nmea.tokenizer import tokenize
from navfix.nmea.types import FixRecord

_MINIMUM_TOKEN_COUNT = 8


def decode_gsv(sentence: str, fix: FixRecord) -> bool:
    """Decode a GSV sentence into the fix record (satellites in view).

    Returns:
        False without modifying the record if the sentence has fewer than
        8 tokens, True otherwise
    """
    tokens = tokenize(sentence)
    if len(tokens) < _MINIMUM_TOKEN_COUNT:
        return False

    update_field(fix, "satellite_count", parse_int_field(tokens[3]))
    return True
