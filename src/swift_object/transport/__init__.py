"""Transport package for issuing requests against the object store."""

from .base import Response, Transport, check_response
from .http import RequestsResponse, RequestsTransport

__all__ = ["Response", "Transport", "RequestsResponse", "RequestsTransport", "check_response"]
