"""GNSS module for reading and decoding NMEA 0183 data from a serial port."""

from navfix.gnss.reader import NMEAReader
from navfix.gnss.types import GNSSSample

__all__ = ["GNSSSample", "NMEAReader"]
