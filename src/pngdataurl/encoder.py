"""
Encoder
=======

Reads the source image, builds its data URL, reports lengths and writes the
result to the output file. Any I/O failure is fatal: it is raised as an
``EncoderError`` subclass and nothing is retried.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from pngdataurl.config import PREVIEW_LENGTH
from pngdataurl.data_url import DATA_URL_PREFIX, build_data_url, preview

logger = logging.getLogger("pngdataurl.encoder")

Reporter = Callable[[str], None]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class EncoderError(Exception):
    """Fatal I/O failure during an encoder run.

    Attributes:
        path: File the failed operation was working on
        reason: Human-readable cause, usually the OSError text
    """

    action = "process"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to {self.action} {path}: {reason}")


class SourceReadError(EncoderError):
    """The source image could not be read."""

    action = "read"


class OutputWriteError(EncoderError):
    """The data URL could not be written to the output file."""

    action = "write"


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EncodeResult:
    """Summary of a completed run."""

    source_path: Path
    output_path: Path
    source_size: int
    payload_length: int
    data_url_length: int
    preview: str


def format_diagnostics(result: EncodeResult) -> list[str]:
    """The three length/preview lines printed before the output is written."""
    return [
        f"Base64 length: {result.payload_length}",
        f"Data URL length: {result.data_url_length}",
        f"First {PREVIEW_LENGTH} chars: {result.preview}",
    ]


def format_confirmation(result: EncodeResult) -> str:
    return f"Base64 data written to {result.output_path.name}"


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------

def read_source(path: Path) -> bytes:
    """Read the whole source file into memory.

    Raises:
        SourceReadError: If the file is missing, unreadable or not a file.
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise SourceReadError(path, exc.strerror or str(exc)) from exc

    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def _output_mode(path: Path) -> int:
    """Permission bits the written file should end up with.

    An existing target keeps its mode; a new one gets ``0o666`` minus the
    process umask, as a plain ``open(path, "w")`` would.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_data_url(path: Path, data_url: str) -> None:
    """Write ``data_url`` to ``path``, replacing any existing file.

    Writes to a temporary file in the same directory, then renames it over
    the target, so the output is either the old file or the complete new one.
    The temp file is given the target's permission bits before the rename.

    Raises:
        OutputWriteError: If the temp file cannot be created, written or renamed.
    """
    try:
        fd, tmp_path = tempfile.mkstemp(
            suffix=".tmp",
            prefix=f"{path.name}.",
            dir=str(path.parent),
        )
    except OSError as exc:
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc

    try:
        with os.fdopen(fd, "w", encoding="ascii", newline="") as f:
            f.write(data_url)
        os.chmod(tmp_path, _output_mode(path))
        os.replace(tmp_path, str(path))
    except OSError as exc:
        try:
            os.unlink(tmp_path)
        except OSError:
            logger.warning("Could not remove temp file %s", tmp_path)
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc

    logger.debug("Wrote %d characters to %s", len(data_url), path)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def encode_file(
    source: Path,
    output: Path,
    *,
    report: Reporter | None = None,
) -> EncodeResult:
    """Encode ``source`` as a PNG data URL and write it to ``output``.

    Steps run strictly in order: read, encode, report lengths, write,
    confirm. A read failure aborts before ``output`` is touched.

    Args:
        source: Image file to read.
        output: Text file to (over)write with the data URL.
        report: Callback receiving each human-readable report line.

    Returns:
        EncodeResult describing the run.

    Raises:
        SourceReadError: If ``source`` cannot be read.
        OutputWriteError: If ``output`` cannot be written.
    """
    emit = report or (lambda line: None)

    raw = read_source(source)
    data_url = build_data_url(raw)

    result = EncodeResult(
        source_path=source,
        output_path=output,
        source_size=len(raw),
        payload_length=len(data_url) - len(DATA_URL_PREFIX),
        data_url_length=len(data_url),
        preview=preview(data_url),
    )
    logger.info(
        "Encoded %s: %d bytes -> %d base64 chars",
        source, result.source_size, result.payload_length,
    )

    for line in format_diagnostics(result):
        emit(line)

    write_data_url(output, data_url)
    emit(format_confirmation(result))
    return result
