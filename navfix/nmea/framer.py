"""Stream framing: reassemble NMEA sentences from arbitrary text chunks.

Serial ports and sockets deliver receiver output in pieces that ignore
sentence boundaries. A read may end in the middle of a sentence, and the
rest arrives with the next read:

    read 1:  "$GPGGA,123519.00,4807.038,N,011"
    read 2:  "31.000,E,1,08,0.9,545.4,M,47.0,M,,*61\\r\\n$GPGSA,A,3,..."

The Framer keeps the unterminated tail of each chunk and prepends it to the
next one, emitting a sentence only once its line terminator has been seen.

Framing strategy:
    - CR and LF both end a line; the CR+LF pair produces a single sentence
      even when the CR and the LF arrive in different chunks.
    - Blank lines are skipped.
    - A fragment that grows past max_line_length without a terminator is
      garbage (a receiver spewing binary, a wrong baud rate). It is dropped
      along with everything up to the next terminator, so its tail never
      appears at the start of a later sentence.
"""

import logging
import re

logger = logging.getLogger(__name__)

# NMEA caps sentences at 82 characters; the limit leaves generous margin
MAX_LINE_LENGTH = 255

_LINE_TERMINATOR = re.compile(r"[\r\n]")


class Framer:
    """Split a character stream into complete NMEA sentences.

    Each instance owns the buffer for exactly one stream. Use one Framer per
    receiver; an instance must not be shared between threads without
    external locking.

    Usage::

        framer = Framer()
        for chunk in chunks:
            for sentence in framer.consume(chunk):
                sentence_type, fix = decode(sentence, fix)

    Args:
        max_line_length: Longest fragment kept while waiting for a line
            terminator (default: 255).
    """

    def __init__(self, max_line_length: int = MAX_LINE_LENGTH) -> None:
        self._max_line_length = max_line_length
        self._residual = ""
        self._discarding = False

    @property
    def residual(self) -> str:
        """The buffered fragment still waiting for its line terminator."""
        return self._residual

    def reset(self) -> None:
        """Forget any buffered fragment, e.g. after reopening the port."""
        self._residual = ""
        self._discarding = False

    def _append(self, segment: str) -> None:
        """Add a segment to the residual buffer, dropping it on overflow."""
        if self._discarding:
            return
        self._residual += segment
        if len(self._residual) > self._max_line_length:
            logger.debug(
                "Dropping %d characters without a line terminator",
                len(self._residual),
            )
            self._residual = ""
            self._discarding = True

    def _terminate(self) -> str | None:
        """Close the current line, returning it unless it must be dropped."""
        line = self._residual
        self._residual = ""
        if self._discarding:
            self._discarding = False
            return None
        return line or None

    def consume(self, chunk: str) -> list[str]:
        """Feed a chunk of received text and collect completed sentences.

        Args:
            chunk: Text of any length, possibly starting or ending in the
                middle of a sentence.

        Returns:
            Sentences completed by this chunk, in stream order, without
            their line terminators. Empty when the chunk holds no terminator.
        """
        sentences: list[str] = []
        start = 0
        while start < len(chunk):
            end = _find_terminator(chunk, start)
            if end < 0:
                self._append(chunk[start:])
                break
            self._append(chunk[start:end])
            sentence = self._terminate()
            if sentence is not None:
                sentences.append(sentence)
            start = end + 1
        return sentences


def _find_terminator(chunk: str, start: int) -> int:
    """Index of the first CR or LF at or after start, -1 if none."""
    match = _LINE_TERMINATOR.search(chunk, start)
    return match.start() if match else -1
