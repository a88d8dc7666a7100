"""Unit and angle conversions for NMEA numeric fields.

NMEA reports ground speed in knots and encodes angles as packed
degree-minute values:

    5630.7930  ->  56 deg 30.7930 min  ->  56.51321... decimal degrees
    08459.3424 ->  84 deg 59.3424 min  ->  84.98904... decimal degrees

The packed conversions are approximate inverses of each other: a round trip
is equal to double-precision tolerance, not bit for bit.
"""

import math

# 1 nautical mile = 1.852 km, so 1 knot = 1.852 km/h
KILOMETERS_PER_NAUTICAL_MILE = 1.852

_MINUTES_PER_DEGREE = 60.0


def knots_to_kph(speed: float) -> float:
    """Convert a speed in knots to kilometres per hour.

    Example:
        >>> knots_to_kph(1)
        1.852
    """
    return speed * KILOMETERS_PER_NAUTICAL_MILE


def packed_angle_to_decimal_degrees(value: float) -> float:
    """Convert a packed NMEA angle (DDDMM.MMMM) to decimal degrees.

    The integer part of value / 100 is the whole degrees; the remainder
    modulo 100 is minutes, contributing minutes / 60 degrees.

    Args:
        value: Packed angle, e.g. 2356.12 for 23 deg 56.12 min

    Returns:
        Decimal degrees, e.g. 23.93533...
    """
    degrees = int(value / 100.0)
    minutes = math.fmod(value, 100.0)
    return degrees + minutes / _MINUTES_PER_DEGREE


def decimal_degrees_to_packed_angle(value: float) -> float:
    """Convert decimal degrees back to a packed NMEA angle (DDDMM.MMMM).

    Args:
        value: Decimal degrees, e.g. 23.93533...

    Returns:
        Packed angle, e.g. 2356.12
    """
    degrees = int(value) * 100
    minutes = math.fmod(value, 1.0) * _MINUTES_PER_DEGREE
    return degrees + minutes
