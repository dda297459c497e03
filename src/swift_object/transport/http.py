"""HTTP transport implementation built on requests."""

import logging
from typing import Any, BinaryIO, Mapping, Optional

import requests

from ..errors import NetworkError
from .base import Response

logger = logging.getLogger(__name__)


class RequestsResponse:
    """
    Wraps a streamed ``requests.Response``.

    The body of a streamed GET is read after ``do_request`` returns, so
    connection failures while reading it are mapped to NetworkError here.
    """

    def __init__(self, response: requests.Response, url: str):
        self._response = response
        self.url = url

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self._response.headers

    @property
    def content(self) -> bytes:
        try:
            return self._response.content
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Connection lost while reading {self.url}: {e}", url=self.url) from e

    @property
    def raw(self) -> BinaryIO:
        """Body stream with any Content-Encoding (gzip, deflate) undone."""
        raw = self._response.raw
        raw.decode_content = True
        return raw

    def close(self) -> None:
        self._response.close()


class RequestsTransport:
    """
    Transport backed by a ``requests.Session``.

    GET bodies are requested with ``stream=True`` so callers may either read
    ``response.content`` or hand ``response.raw`` out as a stream.
    """

    def __init__(
        self,
        timeout: Optional[float] = 30.0,
        verify_tls: bool = True,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize transport.

        Args:
            timeout: Per-request timeout in seconds (None waits forever)
            verify_tls: Whether to verify TLS certificates
            session: Optional pre-configured session
        """
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings) -> "RequestsTransport":
        """Build a transport from ObjectSettings."""
        return cls(timeout=settings.timeout, verify_tls=settings.verify_tls)

    def do_request(
        self,
        url: str,
        method: str,
        headers: Optional[Mapping[str, str]] = None,
        **kwargs: Any,
    ) -> Response:
        kwargs.setdefault("timeout", self.timeout)
        kwargs.setdefault("verify", self.verify_tls)
        kwargs.setdefault("stream", method.upper() == "GET")
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, headers=dict(headers or {}), **kwargs)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise NetworkError(f"Cannot connect to object store: {e}", url=url) from e
        return RequestsResponse(response, url)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
