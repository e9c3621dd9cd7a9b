"""
Encoding detection and decoding for CSV input.

The tokenizer works on text only; this module turns raw bytes into that
text. Detection order:
- UTF-8 / UTF-16 BOM (explicit marker)
- charset-normalizer detection
- UTF-8 if the sample decodes, otherwise Windows-1252
"""

from __future__ import annotations

import logging
from pathlib import Path

from charset_normalizer import from_bytes

from .errors import InputTooLargeError

logger = logging.getLogger(__name__)

# Size of data to use for encoding detection (8KB is usually sufficient)
DETECTION_SAMPLE_SIZE = 8192


def detect_encoding(data: bytes) -> str:
    """
    Detect encoding of CSV data.

    Args:
        data: First ~8KB of file content (or full file if smaller)

    Returns:
        Encoding name, e.g. "utf-8-sig", "utf-8" or "windows-1252"
    """
    if data.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    if data.startswith(b"\xff\xfe") or data.startswith(b"\xfe\xff"):
        return "utf-16"

    results = from_bytes(data[:DETECTION_SAMPLE_SIZE])

    if results:
        best = results.best()
        if best is not None:
            encoding = best.encoding.lower()
            logger.debug("charset-normalizer detected %s", encoding)

            if encoding in ("ascii", "utf-8", "utf8", "utf_8"):
                return "utf-8"

            if encoding in ("cp1252", "windows-1252", "latin-1", "latin_1", "iso-8859-1"):
                return "windows-1252"

            return encoding

    try:
        data[:DETECTION_SAMPLE_SIZE].decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        return "windows-1252"


def decode_with_fallback(data: bytes, encoding: str) -> str:
    """
    Decode bytes with encoding, using replacement for invalid sequences.

    Args:
        data: Bytes to decode
        encoding: Target encoding

    Returns:
        Decoded string (with replacement characters for invalid bytes)
    """
    try:
        return data.decode(encoding)
    except UnicodeDecodeError:
        logger.debug("invalid %s byte sequence, decoding with replacement", encoding)
        return data.decode(encoding, errors="replace")


def read_bytes(
    data: bytes,
    encoding: str | None = None,
    *,
    max_bytes: int | None = None,
) -> str:
    """
    Decode raw CSV content into text.

    Args:
        data: Raw content
        encoding: Explicit encoding, or None to detect
        max_bytes: Maximum accepted size (None or <= 0 = unlimited)

    Raises:
        InputTooLargeError: If data exceeds max_bytes
    """
    if max_bytes is not None and max_bytes > 0 and len(data) > max_bytes:
        raise InputTooLargeError(max_bytes, len(data))

    if encoding is None:
        encoding = detect_encoding(data)

    return decode_with_fallback(data, encoding)


def read_file(
    path: Path | str,
    encoding: str | None = None,
    *,
    max_bytes: int | None = None,
) -> str:
    """
    Read a whole CSV file eagerly and decode it.

    Raises:
        FileNotFoundError: If file does not exist
        InputTooLargeError: If the file exceeds max_bytes
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if max_bytes is not None and max_bytes > 0:
        with path.open("rb") as f:
            data = f.read(max_bytes + 1)
        if len(data) > max_bytes:
            file_size: int | None
            try:
                file_size = path.stat().st_size
            except OSError:
                file_size = None
            raise InputTooLargeError(max_bytes, file_size)
    else:
        data = path.read_bytes()

    logger.debug("read %d bytes from %s", len(data), path)
    return read_bytes(data, encoding)
