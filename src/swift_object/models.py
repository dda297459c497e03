"""Data models for records returned by the object store.

A container listing (``GET /v1/<account>/<container>?format=json``) returns
one record per object. Records describe an object without its content and
without its user metadata.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_CONTENT_TYPE
from .headers import parse_timestamp


class ListingRecord(BaseModel):
    """One object entry from a JSON container listing."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    content_type: str = DEFAULT_CONTENT_TYPE
    size: int = Field(default=0, alias="bytes", ge=0)
    etag: str = Field(default="", alias="hash")
    last_modified: Optional[datetime] = None

    @field_validator("last_modified", mode="before")
    @classmethod
    def validate_last_modified(cls, v: Any) -> Optional[datetime]:
        """Accept ISO 8601 listing timestamps and HTTP dates."""
        if v is None or v == "":
            return None
        parsed = parse_timestamp(v)
        if parsed is None:
            raise ValueError(f"Unparseable last_modified: {v!r}")
        return parsed
