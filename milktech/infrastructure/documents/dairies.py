from __future__ import annotations

from typing import Any

from pydantic import field_validator

from milktech.domain.coercion import clean_text
from milktech.infrastructure.documents.base import RecordId, TimestampedDocument, blank_to_none


class _LocatedDocument(TimestampedDocument):
    address: str = ""
    city: str = ""
    state: str = ""

    @field_validator("address", "city", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> str:
        return clean_text(value)

    @field_validator("state", mode="before")
    @classmethod
    def upper_state(cls, value: Any) -> str:
        return clean_text(value).upper()


class DairyDocument(_LocatedDocument):
    id: RecordId
    trade_name: str
    user_id: RecordId | None = None
    cnpj: str = ""
    phone: str = ""
    lat: float | None = None
    lng: float | None = None

    @field_validator("user_id", "lat", "lng", mode="before")
    @classmethod
    def blank_optional(cls, value: Any) -> Any:
        return blank_to_none(value)


class PersonalDairyDocument(_LocatedDocument):
    id: RecordId
    owner_id: RecordId
    name: str
    cnpj: str = ""
    phone: str = ""
    contact_name: str = ""

    @field_validator("cnpj", "phone", "contact_name", mode="before")
    @classmethod
    def strip_contact(cls, value: Any) -> str:
        return clean_text(value)


class TankDocument(_LocatedDocument):
    id: RecordId
    dairy_id: RecordId
    name: str
    lat: float | None = None
    lng: float | None = None
    responsible_name: str = ""
    responsible_phone: str = ""

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def blank_coordinates(cls, value: Any) -> Any:
        return blank_to_none(value)
