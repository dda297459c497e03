"""Capabilities shared by local and remote objects."""

from typing import Dict, Mapping, Optional, Protocol, Union, runtime_checkable

from .constants import DEFAULT_CONTENT_TYPE
from .hashing import compute_etag


@runtime_checkable
class StorageObject(Protocol):
    """
    Protocol for objects that can be stored in an object container.

    Implementations expose a name, a content type, an optional local
    content buffer, and the size/checksum derived from it.
    """

    @property
    def name(self) -> str:
        ...

    def content_type(self) -> str:
        ...

    def content_length(self) -> int:
        ...

    def etag(self) -> str:
        ...

    def metadata(self) -> Dict[str, str]:
        ...

    def content(self) -> bytes:
        ...


class LocalObject:
    """
    An object that exists only in memory.

    The content buffer has three states: absent (``None``), empty (``b""``),
    and populated. Size and checksum are always computed from the buffer.
    """

    def __init__(
        self,
        name: str,
        content: Union[bytes, str, None] = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ):
        self._name = name
        self._content_type = content_type
        self._content: Optional[bytes] = None
        self._metadata: Dict[str, str] = {}
        if content is not None:
            self.set_content(content)

    @property
    def name(self) -> str:
        return self._name

    def content_type(self) -> str:
        return self._content_type

    def set_content_type(self, content_type: str) -> None:
        self._content_type = content_type

    def has_content(self) -> bool:
        """True if a buffer is set, even an empty one."""
        return self._content is not None

    def has_nonempty_content(self) -> bool:
        return bool(self._content)

    def local_content(self) -> Optional[bytes]:
        """Return the raw buffer without triggering any retrieval."""
        return self._content

    def content(self) -> bytes:
        return self._content if self._content is not None else b""

    def set_content(self, content: Union[bytes, str], content_type: Optional[str] = None) -> None:
        """Replace the buffer; ``str`` content is stored UTF-8 encoded."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._content = bytes(content)
        if content_type is not None:
            self._content_type = content_type

    def clear_content(self) -> None:
        """Return the buffer to the absent state."""
        self._content = None

    def content_length(self) -> int:
        return len(self.content())

    def etag(self) -> str:
        return compute_etag(self.content())

    def metadata(self) -> Dict[str, str]:
        return self._metadata

    def set_metadata(self, metadata: Mapping[str, str]) -> None:
        """Replace metadata wholesale."""
        self._metadata = dict(metadata)
