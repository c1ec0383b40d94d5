"""Run configuration for ssh-ping.

Contains:
- RunConfig: Immutable parameters for a single measurement run
"""

from dataclasses import dataclass

from common.protocol import (
    DEFAULT_SAMPLE_DURATION_S,
    DEFAULT_WARMUP_PINGS,
    LOG_PROGRESS_INTERVAL,
)


@dataclass(frozen=True)
class RunConfig:
    """Parameters for a measurement run, built once at startup.

    Only host comes from the command line. The remaining fields are fixed
    for the CLI and exist so tests can shorten a run.
    """

    host: str
    warmup_pings: int = DEFAULT_WARMUP_PINGS
    duration_s: float = DEFAULT_SAMPLE_DURATION_S
    progress_interval: int = LOG_PROGRESS_INTERVAL

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.warmup_pings < 0:
            raise ValueError(f"warmup_pings must be >= 0, got {self.warmup_pings}")
        if self.duration_s < 0:
            raise ValueError(f"duration_s must be >= 0, got {self.duration_s}")
        if self.progress_interval <= 0:
            raise ValueError(
                f"progress_interval must be > 0, got {self.progress_interval}"
            )
