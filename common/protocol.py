"""Protocol definitions for ssh-ping.

Contains:
- Stream Protocol for the byte streams a ping runs over
- Marker and timing constants for the measurement loop
- Logging configuration
"""

import logging
from typing import Protocol

# TRACE logging level (below DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class Stream(Protocol):
    """Protocol for byte stream operations needed by a ping."""

    def write(self, data: bytes, /) -> int | None: ...
    def read(self, size: int = ..., /) -> bytes: ...
    def flush(self) -> None: ...


# Bytes written per ping; the remote echo must hand back exactly this many
MARKER = b"foo\n"
MARKER_SIZE = len(MARKER)

# Remote side of the session: copies stdin to stdout unchanged
SSH_COMMAND = "ssh"
REMOTE_ECHO_COMMAND = "cat"

# Default timing constants
DEFAULT_WARMUP_PINGS = 3  # Discarded before sampling starts
DEFAULT_SAMPLE_DURATION_S = 5.0  # Wall-clock sampling budget
LOG_PROGRESS_INTERVAL = 100  # Print progress every N samples
SHUTDOWN_TIMEOUT_S = 5.0  # Wait for ssh to exit after stdin closes
