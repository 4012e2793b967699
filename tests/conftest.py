"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest

from ksruntime.io.stream import Stream


SAMPLE_BYTES = bytes(range(16))


@pytest.fixture()
def sample_bytes() -> bytes:
    """Return the bytes written by sample_file."""
    return SAMPLE_BYTES


@pytest.fixture()
def sample_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    """Write sample_bytes to a temporary file and return its path."""
    path = tmp_path / 'sample.bin'
    path.write_bytes(sample_bytes)
    return path


@pytest.fixture()
def file_stream(sample_file: Path):
    """Open sample_file as a Stream, closing it after the test."""
    stream = Stream.open(sample_file)
    yield stream
    stream.close()
