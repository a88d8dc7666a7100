"""NMEA data types for decoded sentences.

This module defines the caller-owned fix record and the sentence type tag
returned by the decoder.

Design Decisions:
    1. One mutable record for every sentence type: each NMEA sentence carries
       a different subset of the fix, so a decode writes only the fields its
       sentence provides and leaves the rest at their previous values. A
       caller feeding RMC, GGA and GSA sentences into the same record sees
       the union of their fields.

    2. Packed coordinates: latitude and longitude are stored exactly as the
       receiver sends them (DDMM.MMMM / DDDMM.MMMM) with separate hemisphere
       flags. Signed decimal degrees are available through the
       latitude_degrees and longitude_degrees properties.

    3. The valid flag is the receiver's own status field (A/V), NOT checksum
       validity. Checksum verification is a separate, caller-invoked step.
"""

import enum
from dataclasses import dataclass, fields

from navfix.nmea.units import packed_angle_to_decimal_degrees

# Dilution of precision reported before any GGA or GSA sentence arrived
UNKNOWN_DILUTION = 99.0


class SentenceType(enum.Enum):
    """Tag identifying which decoder handled a sentence."""

    POSITION_VELOCITY = "RMC"
    FIX_QUALITY = "GGA"
    LAT_LON_FIX = "GLL"
    SATELLITE_GEOMETRY_QUALITY = "GSA"
    SATELLITE_VISIBILITY = "GSV"
    GROUND_SPEED_VECTOR = "VTG"
    UNRECOGNIZED_ERROR = "ERR"


@dataclass
class FixRecord:
    """Navigation fix assembled from one or more decoded sentences.

    Attributes:
        valid: Receiver status flag from RMC / GLL. True for 'A' (active),
            False for 'V' (void).

        latitude: Latitude in NMEA packed form DDMM.MMMM
            (e.g. 5630.793 = 56 deg 30.793 min).

        latitude_is_north: Hemisphere of the latitude. False means south.

        longitude: Longitude in NMEA packed form DDDMM.MMMM
            (e.g. 8459.3424 = 84 deg 59.3424 min).

        longitude_is_east: Hemisphere of the longitude. False means west.

        altitude_meters: Altitude above mean sea level (GGA).

        speed_kph: Ground speed in km/h. Receivers report knots; the value
            is converted at decode time.

        heading_degrees: Track made good relative to true north (RMC).

        horizontal_dilution: HDOP. Lower is better; 99.0 means unknown.

        vertical_dilution: VDOP. Lower is better; 99.0 means unknown.

        satellite_count: Satellites used (GGA) or in view (GSV), whichever
            was decoded last.

        utc_timestamp: Seconds since the epoch built from the RMC time and
            date fields.

    Example:
        >>> fix = FixRecord()
        >>> decode("$GPRMC,091724.00,A,5630.7930,N,08459.3424,E,06.404,075.5,260214,,,A*69", fix)
        (<SentenceType.POSITION_VELOCITY: 'RMC'>, FixRecord(valid=True, ...))
        >>> fix.latitude
        5630.793
        >>> fix.latitude_degrees
        56.51321...
    """

    valid: bool = False
    latitude: float = 0.0
    latitude_is_north: bool = True
    longitude: float = 0.0
    longitude_is_east: bool = True
    altitude_meters: float = 0.0
    speed_kph: float = 0.0
    heading_degrees: float = 0.0
    horizontal_dilution: float = UNKNOWN_DILUTION
    vertical_dilution: float = UNKNOWN_DILUTION
    satellite_count: int = 0
    utc_timestamp: int = 0

    def reset(self) -> None:
        """Restore every field to its default so the record can be reused."""
        for field in fields(self):
            setattr(self, field.name, field.default)

    @property
    def latitude_degrees(self) -> float:
        """Latitude in signed decimal degrees, negative in the southern hemisphere."""
        degrees = packed_angle_to_decimal_degrees(self.latitude)
        return degrees if self.latitude_is_north else -degrees

    @property
    def longitude_degrees(self) -> float:
        """Longitude in signed decimal degrees, negative in the western hemisphere."""
        degrees = packed_angle_to_decimal_degrees(self.longitude)
        return degrees if self.longitude_is_east else -degrees
