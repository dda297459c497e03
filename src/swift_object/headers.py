"""Helpers for reading object state out of Swift response headers."""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Dict, Mapping, Optional

from .constants import METADATA_HEADER_PREFIX


def extract_header_attributes(
    headers: Mapping[str, str],
    prefix: str = METADATA_HEADER_PREFIX,
) -> Dict[str, str]:
    """Extract user metadata from headers carrying the metadata prefix.

    The prefix is stripped and the remainder used as the key. Keys and
    values are passed through verbatim; Swift mandates no encoding.

    Args:
        headers: Response header mapping
        prefix: Metadata header prefix (case-sensitive)

    Returns:
        Mapping of attribute name to value

    Example:
        >>> extract_header_attributes({"X-Object-Meta-Color": "blue", "Etag": "x"})
        {'Color': 'blue'}
    """
    offset = len(prefix)
    return {
        header[offset:]: value
        for header, value in headers.items()
        if header.startswith(prefix)
    }


def parse_content_length(value: Optional[str], default: int = 0) -> int:
    """Parse a Content-Length header, falling back to ``default``."""
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def parse_timestamp(value) -> Optional[datetime]:
    """Parse an HTTP date or ISO 8601 timestamp into an aware datetime.

    Handles both forms Swift emits:
        "Mon, 30 Jan 2012 20:11:11 GMT" (Last-Modified header)
        "2012-01-30T20:11:11.000000"     (container listing)

    Naive timestamps are taken to be UTC. Returns None for empty or
    unparseable input.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip()
        try:
            dt = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            try:
                dt = datetime.fromisoformat(text.rstrip("Z"))
            except ValueError:
                return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


__all__ = [
    "extract_header_attributes",
    "parse_content_length",
    "parse_timestamp",
]
