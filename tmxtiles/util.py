"""Text and byte helpers for decoding TMX tile data."""

from __future__ import annotations

import base64
import binascii
import zlib

_C_WHITESPACE = " \t\n\v\f\r"


def trim(text: str) -> str:
    """Return *text* without leading and trailing ASCII whitespace."""
    return text.strip(_C_WHITESPACE)


def decode_base64(text: str) -> bytes:
    """Decode a base-64 string into raw bytes.

    Raises ValueError if the text is not valid base-64.
    """
    try:
        return base64.b64decode(trim(text), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 data: {exc}") from exc


def decompress_gzip(data: bytes, expected_size: int) -> bytes:
    """Inflate a gzip or zlib stream.

    *expected_size* is the size of the first output chunk; each further
    chunk is twice as large as the one before.  Raises ValueError if the
    stream is corrupt, truncated or followed by extra bytes.
    """
    if expected_size <= 0:
        raise ValueError("expected_size must be positive")

    # 32 added to the window bits lets zlib detect gzip or zlib headers.
    inflater = zlib.decompressobj(zlib.MAX_WBITS | 32)
    chunks: list[bytes] = []
    pending = bytes(data)
    budget = expected_size
    try:
        while not inflater.eof:
            chunk = inflater.decompress(pending, budget)
            chunks.append(chunk)
            pending = inflater.unconsumed_tail
            if not inflater.eof and not pending and not chunk:
                raise ValueError("compressed stream is truncated")
            budget *= 2
    except zlib.error as exc:
        raise ValueError(f"corrupt compressed data: {exc}") from exc

    if inflater.unused_data:
        raise ValueError("unexpected data after the end of the compressed stream")
    return b"".join(chunks)