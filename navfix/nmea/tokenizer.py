"""Positional field splitting for NMEA sentences."""

import re
from functools import lru_cache

# Comma separates fields, asterisk separates the checksum
NMEA_DELIMITERS = ",*"


@lru_cache(maxsize=8)
def _delimiter_pattern(delimiters: str) -> re.Pattern[str]:
    return re.compile(f"[{re.escape(delimiters)}]")


def tokenize(sentence: str, delimiters: str = NMEA_DELIMITERS) -> list[str]:
    """Split a sentence on any of the given delimiter characters.

    Empty fields are preserved, so a field's index always matches its
    position in the sentence even when the receiver leaves it blank.

    Args:
        sentence: NMEA sentence, e.g. "$GPGLL,4916.45,N,12311.12,W,225444,A,*1D"
        delimiters: Characters to split on (default: comma and asterisk)

    Returns:
        Ordered list of field strings

    Example:
        >>> tokenize("$GPVTG,,T,,M*3D")
        ['$GPVTG', '', 'T', '', 'M', '3D']
    """
    if not delimiters:
        return [sentence]
    return _delimiter_pattern(delimiters).split(sentence)
