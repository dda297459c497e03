"""Result values for callers that prefer branching over exception handling."""

from dataclasses import dataclass
from typing import Optional

from .errors import ErrorKind, ObjectError


@dataclass(frozen=True)
class ContentResult:
    """Outcome of a content retrieval: either bytes or an error."""
    content: Optional[bytes] = None
    error: Optional[ObjectError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error kind, or None on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> bytes:
        """Return content or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.content if self.content is not None else b""
