"""Custom exceptions for swift-object.

Every exception carries an ``ErrorKind`` so callers can branch on the kind of
failure (see ``RemoteObject.try_content``) instead of on exception classes.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kind of failure reported by a remote object operation."""
    NOT_FOUND = "not_found"
    AUTH = "auth"
    NETWORK = "network"
    TRANSPORT = "transport"
    VERIFICATION = "verification"
    CONFIG = "config"


class ObjectError(RuntimeError):
    """Base class for all swift-object errors."""
    kind: ErrorKind = ErrorKind.TRANSPORT


# Transport Errors
class TransportError(ObjectError):
    """Remote service answered with a non-success status."""

    def __init__(self, message: str, status: Optional[int] = None, url: Optional[str] = None):
        self.status = status
        self.url = url
        super().__init__(message)


class NotFoundError(TransportError):
    """Object not found at the given URL (404)."""
    kind = ErrorKind.NOT_FOUND


class AuthError(TransportError):
    """Authentication or authorization failed (401/403)."""
    kind = ErrorKind.AUTH


class NetworkError(TransportError):
    """Network connectivity issue with the object store."""
    kind = ErrorKind.NETWORK


# Integrity Errors
class IntegrityError(ObjectError):
    """Base class for data integrity errors."""
    kind = ErrorKind.VERIFICATION


class ContentVerificationError(IntegrityError):
    """Checksum of retrieved content doesn't match the recorded etag."""

    def __init__(self, computed: str, expected: str, name: str = ""):
        self.computed = computed
        self.expected = expected
        self.name = name
        label = f" for {name}" if name else ""
        super().__init__(
            f"Content verification failed{label}\n"
            f"  Expected: {expected}\n"
            f"  Got:      {computed}\n"
            f"The content may have been corrupted in transit or modified concurrently."
        )


# Configuration Errors
class ConfigError(ObjectError):
    """Invalid swift-object configuration."""
    kind = ErrorKind.CONFIG
