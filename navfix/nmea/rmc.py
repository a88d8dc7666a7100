"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) is the position/velocity
sentence: status, coordinates, ground speed, track and the full UTC date and
time. It is the only supported sentence that carries the date.

RMC Sentence Format (tokens split on ',' and '*'):
    $GPRMC,091724.00,A,5630.7930,N,08459.3424,E,06.404,075.5,260214,,,A*69
    0      1         2 3         4 5          6 7      8     9      10-12 13
           |         | |         | |          | |      |     |
           |         | |         | |          | |      |     +-- Date (DDMMYY)
           |         | |         | |          | |      +-- Track made good (degrees true)
           |         | |         | |          | +-- Speed over ground (knots)
           |         | |         | +----------+-- Longitude + E/W
           |         | +---------+-- Latitude + N/S
           |         +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS.ss)

Timestamp construction:
    The time and date fields are combined into seconds since the epoch,
    with the two-digit year read as 2000+YY. With local_time=True (default)
    the components are interpreted like the C library mktime(): as wall-clock
    time in the host's TZ. The same sentence therefore yields different
    timestamps on hosts in different zones. local_time=False interprets
    them as true UTC.
"""

import calendar
import time

from navfix.nmea.fields import (
    parse_fixed_width,
    parse_float_field,
    parse_status_field,
    update_field,
    update_position,
)
from navfix.nmea.tokenizer import tokenize
from navfix.nmea.types import FixRecord
from navfix.nmea.units import knots_to_kph

# Tokens 0-11 plus the checksum; NMEA 2.3+ receivers add a mode indicator
_MINIMUM_TOKEN_COUNT = 13

_CENTURY = 2000


def _build_timestamp(time_field: str, date_field: str, local_time: bool) -> int | None:
    """Combine the HHMMSS time and DDMMYY date fields into epoch seconds.

    Args:
        time_field: UTC time, e.g. "091724.00" (fractional seconds ignored)
        date_field: Date, e.g. "260214"
        local_time: Interpret the components as host local time (mktime)
            instead of UTC (timegm)

    Returns:
        Seconds since the epoch, or None if either field is malformed

    Example:
        >>> _build_timestamp("091724.00", "260214", local_time=False)
        1393406244  # 2014-02-26T09:17:24Z
    """
    components = (
        parse_fixed_width(date_field, 4),
        parse_fixed_width(date_field, 2),
        parse_fixed_width(date_field, 0),
        parse_fixed_width(time_field, 0),
        parse_fixed_width(time_field, 2),
        parse_fixed_width(time_field, 4),
    )
    if any(component is None for component in components):
        return None

    year, month, day, hours, minutes, seconds = components
    time_tuple = (_CENTURY + year, month, day, hours, minutes, seconds, 0, 0, -1)
    try:
        if local_time:
            return int(time.mktime(time_tuple))
        return calendar.timegm(time_tuple)
    except (OverflowError, ValueError):
        return None


def decode_rmc(sentence: str, fix: FixRecord, *, local_time: bool = True) -> bool:
    """Decode an RMC sentence into the fix record.

    Writes validity, position, speed (converted from knots to km/h), heading
    and the UTC timestamp. Other fields of the record are left untouched.

    Args:
        sentence: RMC sentence; the talker prefix is not checked here
        fix: Record to update in place
        local_time: Timestamp interpretation, see module docstring

    Returns:
        False without modifying the record if the sentence has fewer than
        13 tokens, True otherwise
    """
    tokens = tokenize(sentence)
    if len(tokens) < _MINIMUM_TOKEN_COUNT:
        return False

    update_field(fix, "valid", parse_status_field(tokens[2]))
    update_position(fix, tokens, 3)

    speed_knots = parse_float_field(tokens[7])
    if speed_knots is not None:
        fix.speed_kph = knots_to_kph(speed_knots)

    update_field(fix, "heading_degrees", parse_float_field(tokens[8]))
    update_field(
        fix,
        "utc_timestamp",
        _build_timestamp(tokens[1], tokens[9], local_time),
    )
    return True
