"""NMEAReader: serial client streaming decoded NMEA sentences.

Opens the receiver's serial port with pyserial and turns its raw output into
decoded fixes.

Reading strategy:
    Each read takes whatever bytes the port has buffered (at least one,
    waiting up to the read timeout). The bytes are decoded as ASCII and fed
    to a Framer, which reassembles sentences split across reads. Every
    completed sentence is checksum-verified (optional) and decoded into one
    reader-owned FixRecord; a snapshot of that record is emitted per
    recognized sentence.
"""

import contextlib
import copy
import logging
from collections import deque
from collections.abc import Iterator
from types import TracebackType

import serial

from navfix.gnss.types import GNSSSample
from navfix.nmea.checksum import verify_checksum
from navfix.nmea.dispatch import SentenceDecoder
from navfix.nmea.framer import MAX_LINE_LENGTH, Framer
from navfix.nmea.types import FixRecord, SentenceType

__all__ = ["NMEAReader"]

logger = logging.getLogger(__name__)

# --- serial connection defaults -----------------------------------------------

_PORT = "/dev/ttyACM0"
_BAUDRATE = 9600  # NMEA 0183 standard rate
_TIMEOUT = 1.0  # serial read timeout; determines maximum cancel() latency


# --- public API ---------------------------------------------------------------


class NMEAReader:
    """Context manager for reading decoded NMEA sentences from a serial port.

    Two consumption patterns are supported:

    Continuous iteration (recommended for long-running consumers)::

        with NMEAReader("/dev/ttyUSB0", 115200) as receiver:
            for sample in receiver:
                process(sample)

    Single read (useful for one-shot or polling scenarios)::

        with NMEAReader() as receiver:
            sample = receiver.read()

    Args:
        port: Serial device (default: ``"/dev/ttyACM0"``).
        baudrate: Line speed (default: ``9600``).
        verify_checksums: Skip sentences whose checksum does not match
            (default: ``True``). When ``False`` every sentence is decoded.
        local_time: RMC timestamp interpretation, see ``navfix.nmea.rmc``.
        max_line_length: Longest fragment buffered while waiting for a line
            terminator.
    """

    def __init__(
        self,
        port: str = _PORT,
        baudrate: int = _BAUDRATE,
        *,
        verify_checksums: bool = True,
        local_time: bool = True,
        max_line_length: int = MAX_LINE_LENGTH,
    ) -> None:
        """Store connection parameters; the port is opened in ``__enter__``."""
        self._port = port
        self._baudrate = baudrate
        self._verify_checksums = verify_checksums
        self._decoder = SentenceDecoder(local_time=local_time)
        self._framer = Framer(max_line_length)
        self._fix = FixRecord()
        self._pending: deque[str] = deque()
        self._serial: serial.Serial | None = None
        self._cancelled: bool = False

    def __enter__(self) -> "NMEAReader":
        """Open the serial port and reset internal state."""
        self._serial = serial.Serial(self._port, self._baudrate, timeout=_TIMEOUT)
        self._framer.reset()
        self._fix.reset()
        self._pending.clear()
        self._cancelled = False
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the serial port."""
        if self._serial is not None:
            self._serial.close()
            self._serial = None

    def cancel(self) -> None:
        """Cancel pending blocking reads gracefully.

        Sets the cancellation flag and aborts an in-progress serial read so
        that ``read()`` raises ``EOFError`` without waiting for the next
        timeout cycle. Safe to call from another thread.
        """
        self._cancelled = True
        if self._serial is not None:
            with contextlib.suppress(serial.SerialException):
                self._serial.cancel_read()

    def _recv_raw(self, port: serial.Serial) -> bytes:
        """Read whatever the port has buffered; empty on timeout.

        Raises:
            EOFError: If the port was closed or the device disappeared.
        """
        try:
            raw: bytes = port.read(port.in_waiting or 1)
        except (serial.SerialException, OSError) as e:
            raise EOFError("Serial connection closed.") from e
        return raw

    def _fill_pending(self) -> None:
        """Read one chunk and queue the sentences it completes.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If cancelled, or the port was closed.
        """
        if self._serial is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        raw = self._recv_raw(self._serial)
        if not raw and self._cancelled:
            raise EOFError("Serial read cancelled.")
        chunk = raw.decode("ascii", errors="ignore")
        self._pending.extend(self._framer.consume(chunk))

    def _dispatch(self, sentence: str) -> GNSSSample | None:
        """Verify and decode one sentence; returns ``None`` if it is skipped."""
        if self._verify_checksums and not verify_checksum(sentence):
            logger.debug("Checksum mismatch, skipping %r", sentence)
            return None
        sentence_type, fix = self._decoder.decode(sentence, self._fix)
        if sentence_type is SentenceType.UNRECOGNIZED_ERROR:
            return None
        return GNSSSample(
            sentence=sentence,
            sentence_type=sentence_type,
            fix=copy.copy(fix),
        )

    def read(self) -> GNSSSample:
        """Block until the next recognized sentence and return it.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If the read is cancelled or the port is closed.
        """
        if self._serial is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        while True:
            while self._pending:
                result = self._dispatch(self._pending.popleft())
                if result is not None:
                    return result
            self._fill_pending()

    def __iter__(self) -> Iterator[GNSSSample]:
        """Yield decoded samples indefinitely, one per recognized sentence.

        Iteration continues until the caller breaks the loop or an exception
        propagates out (e.g. ``EOFError`` on cancellation). ``StopIteration``
        is never raised.

        Yields:
            ``GNSSSample`` for each recognized sentence.
        """
        while True:
            yield self.read()
