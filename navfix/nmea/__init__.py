"""NMEA 0183 framing and decoding for RMC, GGA, GLL, GSA, GSV and VTG sentences."""

from navfix.nmea.checksum import calculate_checksum, verify_checksum
from navfix.nmea.dispatch import DISPATCH_TABLE, SentenceDecoder, decode
from navfix.nmea.framer import MAX_LINE_LENGTH, Framer
from navfix.nmea.tokenizer import tokenize
from navfix.nmea.types import UNKNOWN_DILUTION, FixRecord, SentenceType
from navfix.nmea.units import (
    decimal_degrees_to_packed_angle,
    knots_to_kph,
    packed_angle_to_decimal_degrees,
)

__all__ = [
    "DISPATCH_TABLE",
    "MAX_LINE_LENGTH",
    "UNKNOWN_DILUTION",
    "FixRecord",
    "Framer",
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
