"""
Pytest Configuration and Fixtures
==================================

Shared fixtures for all test modules.
"""

import os
from pathlib import Path
from typing import Generator

import pytest

from pngdataurl.config import OUTPUT_FILENAME, SOURCE_FILENAME, reset_config

# Keep a developer's environment from leaking into config tests
for _name in ("PNGDATAURL_LOG_LEVEL", "PNGDATAURL_WORK_DIR"):
    os.environ.pop(_name, None)

# 8-byte PNG signature followed by an IHDR chunk for a 1x1 image
PNG_HEADER = (
    b"\x89PNG\r\n\x1a\n"
    b"\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00\x1f\x15\xc4\x89"
)


@pytest.fixture(autouse=True)
def fresh_config() -> Generator[None, None, None]:
    """Reload configuration for every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def png_bytes() -> bytes:
    """Bytes long enough to produce a data URL over 100 characters."""
    return PNG_HEADER + bytes(range(256))


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary working directory the encoder resolves its files in."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def source_file(workdir: Path, png_bytes: bytes) -> Path:
    path = workdir / SOURCE_FILENAME
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def output_file(workdir: Path) -> Path:
    return workdir / OUTPUT_FILENAME
