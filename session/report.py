"""Latency reporting for ssh-ping.

Contains:
- format_millis: Render a duration in seconds as milliseconds
- LatencyReport: Report printed after sampling completes
"""

from dataclasses import dataclass

from common.report import Report
from session.result import LatencyStats


_NS_PER_TENTH_MS = 100_000


def format_millis(seconds: float) -> str:
    """Format seconds as milliseconds rounded to a tenth, padded to 4 chars.

    Rounds in integer nanoseconds to the nearest 100us, ties away from zero.
    """
    ns = round(seconds * 1e9)
    tenths = (abs(ns) + _NS_PER_TENTH_MS // 2) // _NS_PER_TENTH_MS
    if ns < 0:
        tenths = -tenths
    return f"{tenths / 10:4.1f} ms"


@dataclass
class LatencyReport(Report):
    """Report after a sampling run completes."""

    stats: LatencyStats

    def print(self) -> None:
        """Print the latency report."""
        s = self.stats

        print(f"Collected {s.count} samples.")
        print()
        print(f"Min:      {format_millis(s.min_s)}")
        print(f"p05:      {format_millis(s.p05_s)}")
        print(f"p50:      {format_millis(s.p50_s)}")
        print(f"p95:      {format_millis(s.p95_s)}")
        print(f"Max:      {format_millis(s.max_s)}")
        print()
        print(f"Mean:     {format_millis(s.mean_s)}")
        print(f"Std. dev: {format_millis(s.stddev_s)}")

    def success(self) -> bool:
        """Return True if at least one sample was collected."""
        return self.stats.count > 0
