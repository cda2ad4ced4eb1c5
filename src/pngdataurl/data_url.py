"""
Data URL codec
==============

Pure functions for turning raw image bytes into a PNG data URL and back.
No file I/O happens here; see ``pngdataurl.encoder`` for that.
"""

from __future__ import annotations

import base64
import binascii
from typing import Final

from pngdataurl.config import PREVIEW_LENGTH

# Fixed MIME header, always PNG regardless of the actual file contents
DATA_URL_PREFIX: Final[str] = "data:image/png;base64,"


def encode_payload(raw: bytes) -> str:
    """Standard (padded) base64 of ``raw`` as an ASCII string."""
    return base64.b64encode(raw).decode("ascii")


def build_data_url(raw: bytes) -> str:
    """Wrap ``raw`` in a PNG data URL."""
    return DATA_URL_PREFIX + encode_payload(raw)


def decode_data_url(data_url: str) -> bytes:
    """Recover the original bytes from a data URL built by ``build_data_url``.

    Args:
        data_url: String starting with ``DATA_URL_PREFIX``.

    Returns:
        The decoded payload bytes.

    Raises:
        ValueError: If the prefix is missing or the payload is not valid base64.
    """
    if not data_url.startswith(DATA_URL_PREFIX):
        raise ValueError(
            f"Data URL must start with {DATA_URL_PREFIX!r}, got: {data_url[:len(DATA_URL_PREFIX)]!r}"
        )

    payload = data_url[len(DATA_URL_PREFIX):]
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 payload: {exc}") from exc


def preview(data_url: str, limit: int = PREVIEW_LENGTH) -> str:
    """Return at most ``limit`` leading characters of ``data_url``.

    Shorter strings are returned whole.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got: {limit}")
    return data_url[:min(limit, len(data_url))]


def expected_payload_length(size: int) -> int:
    """Length of the padded base64 encoding of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"size must be >= 0, got: {size}")
    return 4 * ((size + 2) // 3)
