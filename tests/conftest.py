"""Shared test fixtures and utilities."""

import hashlib
import io
from typing import Dict, List, Optional

import pytest

from swift_object import RemoteObject

OBJECT_URL = "https://swift.example.com/v1/AUTH_test/photos/cat.txt"
TOKEN = "tk-123"
BODY = b"the quick brown fox"
BODY_ETAG = hashlib.md5(BODY).hexdigest()
LAST_MODIFIED = "Mon, 30 Jan 2012 20:11:11 GMT"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, headers: Optional[Dict[str, str]] = None, body: bytes = b""):
        self.status_code = status_code
        self.headers = headers or {}
        self._body = body
        self.raw = io.BytesIO(body)
        self.closed = False

    @property
    def content(self) -> bytes:
        return self._body

    def close(self):
        self.closed = True


class FakeTransport:
    """In-memory transport that replays queued or default responses."""

    def __init__(self, body: bytes = BODY, headers: Optional[Dict[str, str]] = None, status_code: int = 200):
        self.body = body
        self.headers = headers if headers is not None else make_headers(body)
        self.status_code = status_code
        self.requests: List[tuple] = []
        self.queue: List[FakeResponse] = []

    def do_request(self, url, method, headers=None, **kwargs):
        self.requests.append((url, method, dict(headers or {})))
        if self.queue:
            return self.queue.pop(0)
        body = self.body if method == "GET" else b""
        return FakeResponse(self.status_code, dict(self.headers), body)

    @property
    def methods(self) -> List[str]:
        return [method for _, method, _ in self.requests]


def make_headers(body: bytes = BODY, etag: Optional[str] = None, **meta) -> Dict[str, str]:
    """Build a realistic Swift object header set."""
    headers = {
        "Content-Type": "text/plain",
        "Content-Length": str(len(body)),
        "Etag": etag if etag is not None else hashlib.md5(body).hexdigest(),
        "Last-Modified": LAST_MODIFIED,
        "X-Trans-Id": "tx123",
    }
    for key, value in meta.items():
        headers[f"X-Object-Meta-{key}"] = value
    return headers


@pytest.fixture
def transport():
    """Fake transport serving BODY with matching headers."""
    return FakeTransport(headers=make_headers(BODY, Owner="alice"))


@pytest.fixture
def listing_record():
    return {
        "name": "cat.txt",
        "content_type": "text/plain",
        "bytes": len(BODY),
        "hash": BODY_ETAG,
        "last_modified": "2012-01-30T20:11:11.000000",
    }


@pytest.fixture
def remote(transport, listing_record):
    """RemoteObject built from a listing record, wired to the fake transport."""
    return RemoteObject.from_listing(listing_record, TOKEN, OBJECT_URL, transport=transport)
