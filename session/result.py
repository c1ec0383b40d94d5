"""Latency statistics for ssh-ping.

Contains:
- StatsError: Raised when statistics cannot be computed
- NoSamplesError: Raised when a run retained no samples
- LatencyStats: Descriptive statistics over a run, in seconds
- percentile: Linearly interpolated percentile of a sample set
- compute_latency_stats: Compute stats from RTT samples
"""

import statistics
from dataclasses import dataclass


class StatsError(Exception):
    """Raised when latency statistics cannot be computed."""

    pass


class NoSamplesError(StatsError):
    """Raised when there are no samples to compute statistics over."""

    pass


@dataclass(frozen=True)
class LatencyStats:
    """Computed latency statistics in seconds."""

    count: int
    min_s: float
    p05_s: float
    p50_s: float
    p95_s: float
    max_s: float
    mean_s: float
    stddev_s: float


def percentile(samples: list[float], p: int) -> float:
    """Return the p-th percentile (1-99) of samples.

    Interpolates linearly between ranked samples, matching
    statistics.quantiles(method="inclusive"). The result is clamped to the
    two bracketing samples so float rounding never leaves that interval.
    """
    if not 1 <= p <= 99:
        raise ValueError(f"Percentile must be within 1-99, got {p}")
    if not samples:
        raise NoSamplesError("Cannot compute percentile of zero samples")

    ranked = sorted(samples)
    j, delta = divmod(p * (len(ranked) - 1), 100)
    if delta == 0:
        return ranked[j]

    lo, hi = ranked[j], ranked[j + 1]
    value = (lo * (100 - delta) + hi * delta) / 100
    return min(max(value, lo), hi)


def compute_latency_stats(rtt_samples: list[float]) -> LatencyStats:
    """Compute latency statistics from RTT samples (in seconds).

    Args:
        rtt_samples: List of round-trip times in seconds.

    Returns:
        LatencyStats over all samples.

    Raises:
        NoSamplesError: If rtt_samples is empty.
        StatsError: If the statistics library rejects the samples.
    """
    if not rtt_samples:
        raise NoSamplesError("No samples collected")

    try:
        return LatencyStats(
            count=len(rtt_samples),
            min_s=min(rtt_samples),
            p05_s=percentile(rtt_samples, 5),
            p50_s=statistics.median(rtt_samples),
            p95_s=percentile(rtt_samples, 95),
            max_s=max(rtt_samples),
            mean_s=statistics.mean(rtt_samples),
            stddev_s=statistics.pstdev(rtt_samples),
        )
    except statistics.StatisticsError as e:
        raise StatsError(f"Failed to compute statistics: {e}") from e
