"""Checksum helpers for object content.

Swift reports an object's etag as the hex MD5 digest of its bytes, so local
buffers are hashed the same way for verification and dirtiness checks.
"""

from typing import BinaryIO
import hashlib


def compute_etag(data: bytes) -> str:
    """Compute the Swift etag (hex MD5) of a byte buffer.

    Args:
        data: Raw object content

    Returns:
        32-character lowercase hex digest
    """
    return hashlib.md5(data).hexdigest()


def compute_stream_etag(fh: BinaryIO, chunk_size: int = 8192) -> str:
    """Compute the etag of a readable binary stream without buffering it."""
    md5 = hashlib.md5()
    for chunk in iter(lambda: fh.read(chunk_size), b""):
        md5.update(chunk)
    return md5.hexdigest()


def etags_match(computed: str, expected: str) -> bool:
    """Compare two etags, ignoring surrounding quotes and hex case.

    Some proxies return the etag quoted ("abc...") as RFC 7232 allows.
    """
    return computed.strip('"').lower() == expected.strip('"').lower()


__all__ = [
    "compute_etag",
    "compute_stream_etag",
    "etags_match",
]
