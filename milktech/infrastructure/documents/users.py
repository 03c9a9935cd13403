from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from milktech.domain.value_objects.user_role import UserRole
from milktech.infrastructure.documents.base import Document, RecordId, TimestampedDocument, utcnow


class UserDocument(TimestampedDocument):
    id: RecordId
    email: str
    hashed_password: str
    name: str = ""
    phone: str = ""
    city: str = ""
    state: str = ""
    role: UserRole = UserRole.PRODUCER

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> str:
        return str(value).strip().lower()

    @field_validator("role", mode="before")
    @classmethod
    def coerce_role(cls, value: Any) -> Any:
        return value or UserRole.PRODUCER


class SessionUserDocument(Document):
    id: RecordId
    email: str
    name: str = ""
    phone: str = ""
    city: str = ""
    state: str = ""
    role: UserRole = UserRole.PRODUCER
    created_at: datetime = Field(default_factory=utcnow)
