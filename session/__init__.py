"""Measurement session package for ssh-ping.

This package handles one latency measurement against a remote echo:
- Launching the ssh session
- Timing single round-trips (pings)
- Warm-up and time-bounded sampling
- Statistics computation and reporting
"""

from session.launcher import LaunchError, RemoteSession, launch_session
from session.ping import PingError, run_ping
from session.report import LatencyReport, format_millis
from session.result import (
    LatencyStats,
    NoSamplesError,
    StatsError,
    compute_latency_stats,
    percentile,
)
from session.sampler import SampleRun, collect_samples

__all__ = [
    "LatencyReport",
    "LatencyStats",
    "LaunchError",
    "NoSamplesError",
    "PingError",
    "RemoteSession",
    "SampleRun",
    "StatsError",
    "collect_samples",
    "compute_latency_stats",
    "format_millis",
    "launch_session",
    "percentile",
    "run_ping",
]
