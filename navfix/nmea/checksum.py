"""NMEA checksum calculation and verification.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPRMC,091724.00,A,5630.7930,N,08459.3424,E,06.404,075.5,260214,,,A*69
    ^                        checksum content                          ^^
    start                                                 checksum (0x69 = 105)
"""

import string

# At most two hex digits follow the '*'
_CHECKSUM_DIGITS = 2


def _extract_payload(sentence: str) -> str | None:
    """Extract the checksummed payload between '$' and '*'.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GPGLL,...*1D")

    Returns:
        The characters strictly between the first '$' and the first '*',
        or None if either delimiter is missing or '*' comes before '$'.

    Example:
        >>> _extract_payload("$GPGLL,4916.45*1D")
        'GPGLL,4916.45'
    """
    start = sentence.find("$")
    end = sentence.find("*")
    if start < 0 or end < 0 or end < start:
        return None
    return sentence[start + 1 : end]


def calculate_checksum(sentence: str) -> int | None:
    """Calculate the XOR checksum of an NMEA sentence payload.

    The NMEA checksum algorithm XORs the ASCII value of each character
    between '$' and '*'. The result always fits in one byte.

    Args:
        sentence: NMEA sentence containing both '$' and '*'

    Returns:
        Integer checksum value (0-255), or None when the sentence has no
        payload to checksum (missing '$' or '*')

    Example:
        >>> calculate_checksum("$GPRMC,091724.00,A,5630.7930,N,08459.3424,E,06.404,075.5,260214,,,A*69")
        105
    """
    payload = _extract_payload(sentence)
    if payload is None:
        return None

    result = 0
    for character in payload:
        result ^= ord(character)
    return result & 0xFF


def verify_checksum(sentence: str) -> bool:
    """Verify the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Computing the XOR of the payload between '$' and '*'
    2. Reading the hex digits that follow '*'
    3. Comparing the two numerically (hex digits may be either case)

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - No digits follow '*', or they are not hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> verify_checksum("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D")
        True
        >>> verify_checksum("$GPGLL,4916.45,N,12311.12,W,225444,A,*FF")
        False
    """
    sentence = sentence.strip()

    calculated = calculate_checksum(sentence)
    if calculated is None:
        return False

    position = sentence.index("*") + 1
    provided = sentence[position : position + _CHECKSUM_DIGITS]
    if not provided or not all(c in string.hexdigits for c in provided):
        return False

    return calculated == int(provided, 16)
