from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def blank_to_none(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return value


def coerce_id(value: Any) -> Any:
    # older records may carry numeric ids (millisecond timestamps)
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


# Opaque record identifier: any non-empty string is accepted as-is
RecordId = Annotated[
    str, BeforeValidator(coerce_id), StringConstraints(strip_whitespace=True, min_length=1)
]


class Document(BaseModel):
    """Persisted record. Reads tolerate missing fields from older documents."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")


class TimestampedDocument(Document):
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
