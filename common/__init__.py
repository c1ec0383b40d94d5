"""Common modules for ssh-ping.

This package contains shared code used by the session modules and the CLI:
- protocol: Stream Protocol, marker and timing constants
- config: RunConfig dataclass
- report: Reporting abstractions
"""

from common.config import RunConfig
from common.protocol import (
    DEFAULT_SAMPLE_DURATION_S,
    DEFAULT_WARMUP_PINGS,
    LOG_PROGRESS_INTERVAL,
    MARKER,
    MARKER_SIZE,
    TRACE,
    Stream,
)
from common.report import Report

__all__ = [
    # Protocol
    "Stream",
    "MARKER",
    "MARKER_SIZE",
    "TRACE",
    "DEFAULT_WARMUP_PINGS",
    "DEFAULT_SAMPLE_DURATION_S",
    "LOG_PROGRESS_INTERVAL",
    # Config
    "RunConfig",
    # Reporting
    "Report",
]
