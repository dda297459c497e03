"""Client-side proxy for objects stored in a Swift-style object store."""

from .base import LocalObject, StorageObject
from .config import ObjectSettings, load_settings
from .constants import METADATA_HEADER_PREFIX, SWIFT_OBJECT_VERSION
from .errors import (
    AuthError,
    ConfigError,
    ContentVerificationError,
    ErrorKind,
    IntegrityError,
    NetworkError,
    NotFoundError,
    ObjectError,
    TransportError,
)
from .headers import extract_header_attributes
from .models import ListingRecord
from .remote_object import RemoteObject
from .results import ContentResult
from .transport import RequestsTransport, Transport

__version__ = SWIFT_OBJECT_VERSION

__all__ = [
    "AuthError",
    "ConfigError",
    "ContentResult",
    "ContentVerificationError",
    "ErrorKind",
    "IntegrityError",
    "ListingRecord",
    "LocalObject",
    "METADATA_HEADER_PREFIX",
    "NetworkError",
    "NotFoundError",
    "ObjectError",
    "ObjectSettings",
    "RemoteObject",
    "RequestsTransport",
    "StorageObject",
    "Transport",
    "TransportError",
    "extract_header_attributes",
    "load_settings",
]
