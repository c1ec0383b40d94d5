#!/usr/bin/env python3
"""SSH round-trip latency tool.

Makes an SSH connection, then repeatedly sends data to be echoed back by the
remote side, measuring how long echoing takes. Stats are collected for five
seconds and then printed to stdout.
"""

import argparse
import logging
import sys
from enum import IntEnum

from common.config import RunConfig
from session.launcher import LaunchError, launch_session
from session.ping import PingError
from session.report import LatencyReport
from session.result import NoSamplesError, StatsError, compute_latency_stats
from session.sampler import collect_samples

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Exit codes for ssh-ping."""

    SUCCESS = 0
    USAGE = 1  # --host missing
    LAUNCH_FAILED = 2  # ssh could not be started
    IO_ERROR = 3  # Ping write/read failed or session closed
    STATS_FAILED = 4  # No samples or statistics could not be computed


def run_ssh_ping(config: RunConfig) -> int:
    """Measure latency to config.host and print the report. Returns exit code.

    All failures end here: the error is logged and no statistics are printed.
    """
    if not config.host:
        logger.error("Must set --host.")
        return ExitCode.USAGE

    try:
        with launch_session(config.host) as session:
            run = collect_samples(session.stdin, session.stdout, config)
        stats = compute_latency_stats(run.samples)
    except LaunchError as e:
        logger.error(f"Launch error: {e}")
        return ExitCode.LAUNCH_FAILED
    except PingError as e:
        logger.error(f"Ping failed: {e}")
        return ExitCode.IO_ERROR
    except NoSamplesError as e:
        logger.error(f"{e} (sampling ran for {config.duration_s:g}s)")
        return ExitCode.STATS_FAILED
    except StatsError as e:
        logger.error(f"Statistics error: {e}")
        return ExitCode.STATS_FAILED

    LatencyReport(stats=stats).print()
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Measure round-trip latency of an SSH session",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --host foo.bar.com          Sample latency to foo.bar.com for 5s
""",
    )
    parser.add_argument("--host", type=str, default="", help="Host to connect to over SSH.")
    args = parser.parse_args(argv)

    if not args.host:
        parser.print_usage(sys.stderr)
        print("Must set --host.", file=sys.stderr)
        return ExitCode.USAGE

    logging.basicConfig(level=logging.DEBUG)
    return run_ssh_ping(RunConfig(host=args.host))


if __name__ == "__main__":
    sys.exit(main())
