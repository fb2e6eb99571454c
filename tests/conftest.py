"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

# A small captured build log: colors, a progress bar redrawn with \r,
# and a line cleared with ESC [ K.
SAMPLE_LOG = (
    b"\x1b[1m$ make test\x1b[0m\n"
    b"Downloading  10%\rDownloading  55%\rDownloading 100%\n"
    b"\x1b[32mok\x1b[0m  package/core  0.01s\n"
    b"stale progress line\r\x1b[K\x1b[31mFAIL\x1b[0m package/cli\n"
)


@pytest.fixture
def sample_log() -> bytes:
    """Raw bytes of a small captured build log."""
    return SAMPLE_LOG


@pytest.fixture
def log_file(tmp_path: Path, sample_log: bytes) -> Path:
    """The sample log written to disk."""
    path = tmp_path / "build.log"
    path.write_bytes(sample_log)
    return path
