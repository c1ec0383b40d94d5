"""Remote session launcher for ssh-ping.

Contains:
- LaunchError: Raised when the ssh process cannot be started
- RemoteSession: Running ssh process with its stdin/stdout streams
- launch_session: Start `ssh <host> -- cat`
"""

import logging
import subprocess
from types import TracebackType
from typing import IO

from common.protocol import REMOTE_ECHO_COMMAND, SHUTDOWN_TIMEOUT_S, SSH_COMMAND

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """Raised when the remote session process cannot be started."""

    pass


class RemoteSession:
    """A running ssh process whose remote side echoes stdin to stdout.

    Use as a context manager so the process is shut down on exit.
    """

    def __init__(self, host: str, proc: subprocess.Popen[bytes]) -> None:
        if proc.stdin is None or proc.stdout is None:
            raise LaunchError(f"ssh to {host} started without stdin/stdout pipes")
        self.host = host
        self._proc = proc
        self.stdin: IO[bytes] = proc.stdin
        self.stdout: IO[bytes] = proc.stdout

    def close(self) -> None:
        """Close stdin so the remote echo exits, then reap ssh."""
        try:
            self.stdin.close()
        except OSError as e:
            logger.debug(f"Error closing ssh stdin: {e}")

        try:
            self._proc.wait(timeout=SHUTDOWN_TIMEOUT_S)
        except subprocess.TimeoutExpired:
            logger.warning(f"ssh to {self.host} did not exit, killing it")
            self._proc.kill()
            self._proc.wait()

        self.stdout.close()
        logger.info(f"Closed session to {self.host} (exit={self._proc.returncode})")

    def __enter__(self) -> "RemoteSession":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def launch_session(host: str) -> RemoteSession:
    """Start an ssh session to host running the remote echo command.

    stderr is inherited so ssh diagnostics reach the terminal.

    Raises:
        ValueError: If host is empty.
        LaunchError: If ssh cannot be started.
    """
    if not host:
        raise ValueError("host must not be empty")

    args = [SSH_COMMAND, host, "--", REMOTE_ECHO_COMMAND]
    logger.debug(f"Starting: {' '.join(args)}")
    try:
        proc = subprocess.Popen(
            args,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
        )
    except OSError as e:
        raise LaunchError(f"Failed to start {SSH_COMMAND}: {e}") from e

    logger.info(f"Started ssh to {host} (pid={proc.pid})")
    return RemoteSession(host, proc)
