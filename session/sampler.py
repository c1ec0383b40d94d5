"""Sampling loop for ssh-ping.

Contains:
- SampleRun: Samples retained by one measurement run
- collect_samples: Warm-up pings followed by time-bounded sampling
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from common.config import RunConfig
from common.protocol import Stream
from session.ping import run_ping

logger = logging.getLogger(__name__)


@dataclass
class SampleRun:
    """Result of a sampling run.

    Attributes:
        samples: Round-trip times in seconds, in completion order.
        warmup_count: Number of discarded warm-up pings.
        elapsed_s: Wall-clock time spent in the sampling phase.
    """

    samples: list[float] = field(default_factory=list)
    warmup_count: int = 0
    elapsed_s: float = 0.0


def collect_samples(
    outgoing: Stream,
    incoming: Stream,
    config: RunConfig,
    clock: Callable[[], float] = time.monotonic,
) -> SampleRun:
    """Run warm-up pings, then sample until config.duration_s has passed.

    Warm-up results are thrown away since the first few pings incur session
    startup costs. Progress is printed every config.progress_interval samples.

    Raises:
        PingError: On the first failed ping. No partial results are returned.
    """
    run = SampleRun()

    logger.debug(f"Warmup: sending {config.warmup_pings} pings")
    for _ in range(config.warmup_pings):
        run_ping(outgoing, incoming)
        run.warmup_count += 1

    logger.info(f"Sampling for {config.duration_s:g}s")
    start = clock()
    while clock() - start < config.duration_s:
        run.samples.append(run_ping(outgoing, incoming))
        if len(run.samples) % config.progress_interval == 0:
            print(len(run.samples), "samples so far...", flush=True)

    run.elapsed_s = clock() - start
    logger.debug(f"Sampling done: {len(run.samples)} samples in {run.elapsed_s:.2f}s")
    return run
