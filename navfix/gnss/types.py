"""GNSS data types emitted by the receiver reader."""

from dataclasses import dataclass

from navfix.nmea.types import FixRecord, SentenceType


@dataclass
class GNSSSample:
    """One decoded sentence together with the fix accumulated so far.

    ``NMEAReader`` emits one ``GNSSSample`` per recognized sentence. The
    reader keeps a single ``FixRecord`` that every sentence updates, so
    ``fix`` reflects the latest value of every field seen on the stream,
    not just the fields of ``sentence``.

    Attributes:
        sentence: The raw sentence that produced this sample, without its
            line terminator.

        sentence_type: Which decoder handled the sentence. Never
            ``SentenceType.UNRECOGNIZED_ERROR``; unrecognized sentences are
            skipped by the reader.

        fix: Snapshot of the accumulated fix record. Later sentences do not
            modify it.

    Example:
        >>> with NMEAReader("/dev/ttyACM0") as receiver:
        ...     sample = receiver.read()
        >>> sample.sentence_type
        <SentenceType.FIX_QUALITY: 'GGA'>
        >>> sample.fix.satellite_count
        8
    """

    sentence: str
    sentence_type: SentenceType
    fix: FixRecord
