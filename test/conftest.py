"""pytest configuration and fixtures for ssh-ping tests.

Provides:
- LoopbackStream: In-memory stream that echoes writes back to reads
- ClosedStream: Stream whose reads hit EOF immediately
- pyserial loop:// port fixture
- Fake ssh executables for CLI tests
- Markers for unit vs integration tests
"""

import io
import os
import stat
import sys
import threading
from collections.abc import Generator
from pathlib import Path

import pytest
import serial


class LoopbackStream:
    """Perfect in-memory loopback for unit testing.

    Uses a single buffer shared between read and write operations.
    Data written can be read back immediately, standing in for both
    ends of a remote echo.
    """

    def __init__(self) -> None:
        self._buffer = io.BytesIO()
        self._read_pos = 0
        self._lock = threading.Lock()
        self.writes = 0

    def write(self, data: bytes, /) -> int:
        with self._lock:
            pos = self._buffer.tell()
            self._buffer.seek(0, 2)  # Seek to end
            written = self._buffer.write(data)
            self._buffer.seek(pos)
            self.writes += 1
            return written

    def read(self, size: int = 1, /) -> bytes:
        with self._lock:
            self._buffer.seek(self._read_pos)
            data = self._buffer.read(size)
            self._read_pos = self._buffer.tell()
            return data

    def flush(self) -> None:
        pass

    def inject(self, data: bytes) -> None:
        """Inject data into the buffer as if echoed by the peer."""
        self.write(data)


class ClosedStream:
    """Stream whose peer has gone away: writes succeed, reads return EOF."""

    def write(self, data: bytes, /) -> int:
        return len(data)

    def read(self, size: int = 1, /) -> bytes:
        return b""

    def flush(self) -> None:
        pass


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test (runs sshping.py)")


@pytest.fixture
def loopback() -> LoopbackStream:
    """Return an in-memory loopback stream."""
    return LoopbackStream()


@pytest.fixture
def closed_stream() -> ClosedStream:
    """Return a stream that is already at EOF."""
    return ClosedStream()


@pytest.fixture
def loop_port() -> Generator[serial.SerialBase, None, None]:
    """Open a pyserial loop:// port: bytes written are read back in order."""
    port = serial.serial_for_url("loop://", timeout=1.0)
    try:
        yield port
    finally:
        port.close()


def _write_fake_ssh(bin_dir: Path, body: str) -> Path:
    bin_dir.mkdir(parents=True, exist_ok=True)
    ssh = bin_dir / "ssh"
    ssh.write_text(f"#!/bin/sh\n{body}\n")
    ssh.chmod(ssh.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return bin_dir


@pytest.fixture
def echo_ssh_path(tmp_path: Path) -> str:
    """PATH with a fake ssh that ignores its arguments and runs cat locally."""
    if sys.platform not in ("linux", "darwin"):
        pytest.skip("fake ssh fixture requires a POSIX shell")
    bin_dir = _write_fake_ssh(tmp_path / "echo-bin", "exec cat")
    return f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}"


@pytest.fixture
def dead_ssh_path(tmp_path: Path) -> str:
    """PATH with a fake ssh that exits at once, closing its stdout."""
    if sys.platform not in ("linux", "darwin"):
        pytest.skip("fake ssh fixture requires a POSIX shell")
    bin_dir = _write_fake_ssh(tmp_path / "dead-bin", "exit 0")
    return f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}"


@pytest.fixture
def script_dir() -> Path:
    """Return path to the main script directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sshping_path(script_dir: Path) -> Path:
    """Return path to sshping.py."""
    return script_dir / "sshping.py"
