"""Proxy for a single object stored in a Swift-style object store.

A RemoteObject is built from server-supplied metadata (a container listing
record or the headers of a GET/HEAD) without fetching content. Content is
loaded lazily on first access, verified against the recorded etag, and kept
locally only when caching is enabled.

State transitions:

    no buffer --content() [caching]--> cached buffer
    no buffer --set_content()-------> local buffer (dirty if etag differs)
    any       --refresh()-----------> no buffer (metadata re-synced)
    any       --refresh(True)-------> buffer = fresh server body

Reads never discard a local buffer; only refresh() does.
"""

import io
import logging
from datetime import datetime
from typing import Any, BinaryIO, Dict, Mapping, Optional, Union

from .base import LocalObject
from .config import ObjectSettings
from .constants import (
    AUTH_TOKEN_HEADER,
    CONTENT_LENGTH_HEADER,
    CONTENT_TYPE_HEADER,
    DEFAULT_CONTENT_TYPE,
    ETAG_HEADER,
    LAST_MODIFIED_HEADER,
)
from .errors import ContentVerificationError, ObjectError
from .hashing import compute_etag, etags_match
from .headers import extract_header_attributes, parse_content_length, parse_timestamp
from .models import ListingRecord
from .results import ContentResult
from .transport.base import Response, Transport, check_response

logger = logging.getLogger(__name__)


class RemoteObject:
    """
    An object whose authoritative copy lives in the remote store.

    Size, etag and type come from the server until a local buffer is set,
    after which size and etag are computed from the buffer. Local state is
    held in a composed LocalObject.

    Not thread-safe: callers must serialize access to a single instance.
    """

    def __init__(
        self,
        name: str,
        token: Optional[str] = None,
        url: Optional[str] = None,
        transport: Optional[Transport] = None,
        settings: Optional[ObjectSettings] = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ):
        """
        Initialize a remote object proxy. Performs no I/O.

        Args:
            name: Object name within its container
            token: Auth token sent as X-Auth-Token
            url: Canonical object URL for GET/HEAD
            transport: Transport used for all requests
            settings: Defaults for caching, verification and metadata prefix
            content_type: Server-reported MIME type
        """
        self.settings = settings or ObjectSettings()
        self._local = LocalObject(name, content_type=content_type)
        self._token = token
        self._url = url
        self.transport = transport

        self._content_length = 0
        self._etag = ""
        self._last_modified: Optional[datetime] = None

        self._caching = self.settings.caching
        self._content_verification = self.settings.content_verification

    # ---- Factories ----

    @classmethod
    def from_listing(
        cls,
        record: Union[ListingRecord, Mapping[str, Any]],
        token: Optional[str],
        url: Optional[str],
        transport: Optional[Transport] = None,
        settings: Optional[ObjectSettings] = None,
    ) -> "RemoteObject":
        """
        Create an object from a JSON container listing record.

        Listing records carry no user metadata, so metadata starts empty.

        Args:
            record: Listing record with name, content_type, bytes, hash, last_modified
            token: Auth token
            url: Object URL
        """
        if not isinstance(record, ListingRecord):
            record = ListingRecord.model_validate(record)

        obj = cls(
            record.name,
            token=token,
            url=url,
            transport=transport,
            settings=settings,
            content_type=record.content_type,
        )
        obj._content_length = record.size
        obj._etag = record.etag
        obj._last_modified = record.last_modified
        return obj

    @classmethod
    def from_headers(
        cls,
        name: str,
        headers: Mapping[str, str],
        token: Optional[str],
        url: Optional[str],
        transport: Optional[Transport] = None,
        settings: Optional[ObjectSettings] = None,
    ) -> "RemoteObject":
        """
        Create an object from the headers of a GET or HEAD response.

        Args:
            name: Object name
            headers: Response headers (Content-Type, Content-Length, Etag,
                Last-Modified and any metadata-prefixed headers)
            token: Auth token
            url: Object URL
        """
        obj = cls(
            name,
            token=token,
            url=url,
            transport=transport,
            settings=settings,
            content_type=headers.get(CONTENT_TYPE_HEADER, DEFAULT_CONTENT_TYPE),
        )
        obj._content_length = parse_content_length(headers.get(CONTENT_LENGTH_HEADER))
        obj._etag = str(headers.get(ETAG_HEADER, ""))
        obj._last_modified = parse_timestamp(headers.get(LAST_MODIFIED_HEADER))
        obj._local.set_metadata(
            extract_header_attributes(headers, obj.settings.metadata_prefix)
        )
        return obj

    # ---- Accessors ----

    @property
    def name(self) -> str:
        return self._local.name

    @property
    def url(self) -> Optional[str]:
        return self._url

    @property
    def token(self) -> Optional[str]:
        return self._token

    def content_type(self) -> str:
        return self._local.content_type()

    def content_length(self) -> int:
        """Size in bytes: local buffer length if set, else server-reported size."""
        if self._local.has_nonempty_content():
            return self._local.content_length()
        return self._content_length

    def etag(self) -> str:
        """Checksum: MD5 of local buffer if set, else server-reported etag."""
        if self._local.has_nonempty_content():
            return self._local.etag()
        return self._etag

    checksum = etag

    def last_modified(self) -> Optional[datetime]:
        return self._last_modified

    def metadata(self) -> Dict[str, str]:
        return self._local.metadata()

    def has_local_content(self) -> bool:
        return self._local.has_content()

    # ---- Local edits ----

    def set_content(self, content: Union[bytes, str], content_type: Optional[str] = None) -> None:
        """Set the local buffer. Not persisted until saved elsewhere."""
        self._local.set_content(content, content_type)

    def set_content_type(self, content_type: str) -> None:
        self._local.set_content_type(content_type)

    def set_metadata(self, metadata: Mapping[str, str]) -> None:
        self._local.set_metadata(metadata)

    # ---- Toggles ----

    def set_caching(self, enabled: bool) -> None:
        """Enable or disable caching of fetched content.

        Only affects future content() calls; an existing buffer is kept.
        """
        self._caching = bool(enabled)

    def is_caching(self) -> bool:
        return self._caching

    def set_content_verification(self, enabled: bool) -> None:
        """Enable or disable etag verification in content()."""
        self._content_verification = bool(enabled)

    def is_verifying_content(self) -> bool:
        return self._content_verification

    # ---- Retrieval ----

    def content(self) -> bytes:
        """
        Return the full object content.

        A non-empty local buffer is returned as-is. Otherwise the object is
        fetched with GET, verified against the etag (if verification is
        enabled), and stored locally if caching is enabled.

        Returns:
            Object content

        Raises:
            ContentVerificationError: Fetched bytes don't match the etag
            NotFoundError: Object does not exist
            TransportError: Any other failed request
        """
        if self._local.has_nonempty_content():
            logger.debug("Serving %s from local buffer", self.name)
            return self._local.content()

        response = self._fetch(include_body=True)
        content = response.content

        if self._content_verification:
            check = compute_etag(content)
            expected = self.etag()
            if not etags_match(check, expected):
                logger.warning(
                    "Checksum %s does not match etag %s for %s", check, expected, self.name
                )
                raise ContentVerificationError(check, expected, self.name)

        if self._caching:
            self._local.set_content(content)
            logger.debug("Cached %d bytes for %s", len(content), self.name)

        return content

    def try_content(self) -> ContentResult:
        """Like content(), but returns failures as a ContentResult."""
        try:
            return ContentResult(content=self.content())
        except ObjectError as e:
            return ContentResult(error=e)

    def stream(self, refresh: bool = False) -> BinaryIO:
        """
        Return a readable stream positioned at the start of the content.

        With a local buffer (and ``refresh`` false) the buffer is wrapped in
        memory. Otherwise a GET is issued and the transport's body stream is
        returned unverified. Each call returns a new stream, which the
        caller must close.

        The transport is expected to undo any Content-Encoding on the
        stream (RequestsTransport does), so streamed bytes match content().

        Args:
            refresh: Ignore any local buffer and read from the server
        """
        if not refresh and self._local.has_content():
            return io.BytesIO(self._local.content())

        response = self._fetch(include_body=True)
        return response.raw

    def is_dirty(self) -> bool:
        """True if the local buffer differs from the last known remote etag."""
        local = self._local.local_content()
        if local is None:
            return False
        return not etags_match(compute_etag(local), self._etag)

    def refresh(self, fetch_content: bool = False) -> None:
        """
        Re-synchronize with the server, discarding any local buffer.

        Local edits are lost. With ``fetch_content`` the fresh body becomes
        the local buffer; it is not verified.

        Args:
            fetch_content: GET the body instead of issuing a HEAD
        """
        self._local.clear_content()
        response = self._fetch(include_body=fetch_content)
        if fetch_content:
            self._local.set_content(response.content)

    # ---- Internals ----

    def _fetch(self, include_body: bool = False) -> Response:
        """
        Issue GET (with body) or HEAD and sync local fields from the response.

        Every stored field falls back to its current value when the header
        is missing. Metadata is replaced wholesale.

        Raises:
            ValueError: No transport, URL or token configured
            NotFoundError: 404
            AuthError: 401/403
            TransportError: Any other non-200 status
        """
        if self.transport is None:
            raise ValueError(f"No transport configured for {self.name}")
        if not self._url or not self._token:
            raise ValueError(f"URL and token are required to fetch {self.name}")

        method = "GET" if include_body else "HEAD"
        response = self.transport.do_request(
            self._url, method, headers={AUTH_TOKEN_HEADER: self._token}
        )

        try:
            check_response(response, self._url, method)
        except ObjectError:
            close = getattr(response, "close", None)
            if close is not None:
                close()
            raise

        headers = response.headers
        self._local.set_content_type(headers.get(CONTENT_TYPE_HEADER, self.content_type()))
        self._last_modified = (
            parse_timestamp(headers.get(LAST_MODIFIED_HEADER)) or self._last_modified
        )
        self._etag = str(headers.get(ETAG_HEADER, self._etag))
        self._content_length = parse_content_length(
            headers.get(CONTENT_LENGTH_HEADER), self._content_length
        )
        self._local.set_metadata(
            extract_header_attributes(headers, self.settings.metadata_prefix)
        )
        return response

    def __repr__(self) -> str:
        return (
            f"RemoteObject(name={self.name!r}, url={self._url!r}, "
            f"content_length={self.content_length()}, etag={self.etag()!r})"
        )
