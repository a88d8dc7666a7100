"""Navfix package for framing and decoding NMEA 0183 receiver output."""

from navfix.gnss import GNSSSample, NMEAReader
from navfix.nmea import (
    FixRecord,
    Framer,
    SentenceDecoder,
    SentenceType,
    calculate_checksum,
    decimal_degrees_to_packed_angle,
    decode,
    knots_to_kph,
    packed_angle_to_decimal_degrees,
    tokenize,
    verify_checksum,
)

__all__ = [
    "FixRecord",
    "Framer",
    "GNSSSample",
    "NMEAReader",
    "SentenceDecoder",
    "SentenceType",
    "calculate_checksum",
    "decimal_degrees_to_packed_angle",
    "decode",
    "knots_to_kph",
    "packed_angle_to_decimal_degrees",
    "tokenize",
    "verify_checksum",
]
