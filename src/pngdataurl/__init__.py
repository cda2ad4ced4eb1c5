"""Encode a local PNG file as a ``data:image/png;base64,`` URL."""

from pngdataurl.data_url import (
    DATA_URL_PREFIX,
    build_data_url,
    decode_data_url,
    encode_payload,
    expected_payload_length,
    preview,
)
from pngdataurl.encoder import (
    EncodeResult,
    EncoderError,
    OutputWriteError,
    SourceReadError,
    encode_file,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DATA_URL_PREFIX",
    "build_data_url",
    "decode_data_url",
    "encode_payload",
    "expected_payload_length",
    "preview",
    "EncodeResult",
    "EncoderError",
    "OutputWriteError",
    "SourceReadError",
    "encode_file",
]
