"""Ping primitive for ssh-ping.

Contains:
- PingError: Raised when a round-trip cannot complete
- run_ping: Write the marker, read it back, return the elapsed time
"""

import logging
import time

from common.protocol import MARKER, MARKER_SIZE, TRACE, Stream

logger = logging.getLogger(__name__)


class PingError(Exception):
    """Raised when a ping write or read fails or the stream closes early."""

    pass


def _read_exact(incoming: Stream, size: int) -> bytes:
    """Block until exactly size bytes are read.

    Raises:
        PingError: If the stream hits EOF first.
    """
    buf = b""
    while len(buf) < size:
        chunk = incoming.read(size - len(buf))
        if not chunk:
            raise PingError(
                f"Stream closed after {len(buf)} of {size} bytes were echoed"
            )
        buf += chunk
    return buf


def run_ping(outgoing: Stream, incoming: Stream) -> float:
    """Send the marker and wait for it to be echoed back.

    Args:
        outgoing: Stream connected to the remote echo command's input.
        incoming: Stream connected to the remote echo command's output.

    Returns:
        Round-trip time in seconds.

    Raises:
        PingError: On any write/read error, early EOF, or a corrupted echo.
    """
    start = time.perf_counter()

    try:
        outgoing.write(MARKER)
        outgoing.flush()
        echoed = _read_exact(incoming, MARKER_SIZE)
    except OSError as e:
        raise PingError(f"I/O error during ping: {e}") from e

    rtt = time.perf_counter() - start

    if echoed != MARKER:
        raise PingError(f"Expected echo {MARKER!r}, got {echoed!r}")

    logger.log(TRACE, f"Ping: RTT={rtt * 1000:.3f}ms")
    return rtt
