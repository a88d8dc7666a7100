"""Sentence dispatch: route each NMEA sentence to its decoder.

The header token ("$GPRMC", "$GNGGA", ...) is split into a talker prefix and
a three-letter sentence code. The prefix must belong to a supported
constellation; the code selects a decoder from the dispatch table:

    RMC -> decode_rmc -> SentenceType.POSITION_VELOCITY
    GGA -> decode_gga -> SentenceType.FIX_QUALITY
    GLL -> decode_gll -> SentenceType.LAT_LON_FIX
    GSA -> decode_gsa -> SentenceType.SATELLITE_GEOMETRY_QUALITY
    GSV -> decode_gsv -> SentenceType.SATELLITE_VISIBILITY
    VTG -> decode_vtg -> SentenceType.GROUND_SPEED_VECTOR

Anything else, including a known code whose sentence is too short for its
layout, is reported as SentenceType.UNRECOGNIZED_ERROR and the fix record is
left exactly as it was.

Checksums are not verified here. Callers that want to reject corrupted
sentences call verify_checksum first.
"""

import logging
from collections.abc import Callable
from functools import partial

from navfix.nmea.fields import TALKER_PREFIXES
from navfix.nmea.gga import decode_gga
from navfix.nmea.gll import decode_gll
from navfix.nmea.gsa import decode_gsa
from navfix.nmea.gsv import decode_gsv
from navfix.nmea.rmc import decode_rmc
from navfix.nmea.types import FixRecord, SentenceType
from navfix.nmea.vtg import decode_vtg

logger = logging.getLogger(__name__)

Decoder = Callable[[str, FixRecord], bool]

DISPATCH_TABLE: dict[str, tuple[SentenceType, Decoder]] = {
    "RMC": (SentenceType.POSITION_VELOCITY, decode_rmc),
    "GGA": (SentenceType.FIX_QUALITY, decode_gga),
    "GLL": (SentenceType.LAT_LON_FIX, decode_gll),
    "GSA": (SentenceType.SATELLITE_GEOMETRY_QUALITY, decode_gsa),
    "GSV": (SentenceType.SATELLITE_VISIBILITY, decode_gsv),
    "VTG": (SentenceType.GROUND_SPEED_VECTOR, decode_vtg),
}


def _split_header(sentence: str) -> str | None:
    """Return the sentence code after a supported talker prefix.

    Example:
        "$GNGGA,123519.00,..." -> "GGA"
        "$GBGGA,123519.00,..." -> None (unsupported talker)
    """
    header = sentence.split(",", 1)[0]
    for prefix in TALKER_PREFIXES:
        if header.startswith(prefix):
            return header[len(prefix) :]
    return None


class SentenceDecoder:
    """Dispatch table bound to one decoding configuration.

    Args:
        local_time: Build RMC timestamps with host local time semantics
            (mktime, the default) instead of UTC (timegm).
    """

    def __init__(self, *, local_time: bool = True) -> None:
        self.local_time = local_time
        self._table = dict(DISPATCH_TABLE)
        self._table["RMC"] = (
            SentenceType.POSITION_VELOCITY,
            partial(decode_rmc, local_time=local_time),
        )

    def decode(
        self,
        sentence: str,
        fix: FixRecord | None = None,
    ) -> tuple[SentenceType, FixRecord]:
        """Decode one sentence into a fix record.

        Args:
            sentence: One complete NMEA sentence, e.g. as emitted by Framer
            fix: Record to update in place; a fresh FixRecord when omitted

        Returns:
            The sentence type and the (possibly updated) record. On
            UNRECOGNIZED_ERROR the record is returned unmodified.
        """
        if fix is None:
            fix = FixRecord()

        code = _split_header(sentence)
        if code is None:
            logger.debug("Unsupported talker in sentence %r", sentence)
            return SentenceType.UNRECOGNIZED_ERROR, fix

        entry = self._table.get(code)
        if entry is None:
            logger.debug("No decoder for sentence code %r", code)
            return SentenceType.UNRECOGNIZED_ERROR, fix

        sentence_type, decoder = entry
        if not decoder(sentence, fix):
            logger.debug("Too few fields for %s sentence %r", code, sentence)
            return SentenceType.UNRECOGNIZED_ERROR, fix

        return sentence_type, fix


_DEFAULT_DECODER = SentenceDecoder()
_UTC_DECODER = SentenceDecoder(local_time=False)


def decode(
    sentence: str,
    fix: FixRecord | None = None,
    *,
    local_time: bool = True,
) -> tuple[SentenceType, FixRecord]:
    """Decode one NMEA sentence into a fix record.

    This is the main entry point for decoding. It performs:
    1. Talker prefix check ($GP, $GL, $GN or $GA)
    2. Decoder lookup by sentence code
    3. Token count validation for the sentence layout
    4. Positional field parsing into the record

    Args:
        sentence: One complete NMEA sentence
        fix: Record to update in place; a fresh FixRecord when omitted
        local_time: RMC timestamp interpretation (see navfix.nmea.rmc)

    Returns:
        (SentenceType, FixRecord). Only the fields carried by the sentence
        type are written; all others keep their previous values.

    Example:
        >>> sentence_type, fix = decode("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39")
        >>> sentence_type
        <SentenceType.SATELLITE_GEOMETRY_QUALITY: 'GSA'>
        >>> fix.horizontal_dilution, fix.vertical_dilution
        (1.3, 2.1)
    """
    decoder = _DEFAULT_DECODER if local_time else _UTC_DECODER
    return decoder.decode(sentence, fix)
