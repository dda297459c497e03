"""Base protocol for transport implementations."""

from typing import Any, BinaryIO, Mapping, Optional, Protocol

from ..errors import AuthError, NotFoundError, TransportError


class Response(Protocol):
    """
    Protocol for transport responses.

    Matches the subset of ``requests.Response`` the object proxy consumes.
    """

    status_code: int
    headers: Mapping[str, str]

    @property
    def content(self) -> bytes:
        """Full body, read into memory."""
        ...

    @property
    def raw(self) -> BinaryIO:
        """Unread body as a sequential byte stream."""
        ...


class Transport(Protocol):
    """
    Protocol for transport implementations.

    The hosting application owns the transport and injects it into each
    object. Connection failures surface as NetworkError; status codes are
    returned as-is and checked by the caller.
    """

    def do_request(
        self,
        url: str,
        method: str,
        headers: Optional[Mapping[str, str]] = None,
        **kwargs: Any,
    ) -> Response:
        """
        Issue a request and return the response.

        Args:
            url: Absolute object URL
            method: HTTP method ("GET", "HEAD")
            headers: Request headers

        Returns:
            Response with an unread body for GET
        """
        ...


def check_response(response: Response, url: str, method: str = "GET") -> None:
    """Raise the matching TransportError for any non-200 status.

    Raises:
        NotFoundError: 404
        AuthError: 401 or 403
        TransportError: Any other non-200 status
    """
    status = response.status_code
    if status == 200:
        return
    if status == 404:
        raise NotFoundError(f"Object not found: {url}", status=status, url=url)
    if status in (401, 403):
        raise AuthError(f"Authentication failed for {url} ({status})", status=status, url=url)
    raise TransportError(
        f"Unexpected status {status} for {method} {url}", status=status, url=url
    )
