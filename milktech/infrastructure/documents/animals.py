from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any

from pydantic import field_validator

from milktech.domain.coercion import clean_text, safe_date, to_decimal
from milktech.domain.value_objects.animal_status import AnimalStatus
from milktech.domain.value_objects.animal_type import AnimalType
from milktech.domain.value_objects.movement_type import MovementType
from milktech.domain.value_objects.reproduction import ReproEventKind
from milktech.infrastructure.documents.base import RecordId, TimestampedDocument, blank_to_none
from milktech.utils.dates import normalize_date


def _optional_date(value: Any) -> dt.date | None:
    value = blank_to_none(value)
    return normalize_date(value) if value is not None else None


class AnimalDocument(TimestampedDocument):
    id: RecordId
    owner_id: RecordId
    name: str = ""
    earring: str = ""
    type: AnimalType = AnimalType.COW
    breed: str = ""
    status: AnimalStatus = AnimalStatus.ACTIVE
    stage: str = ""
    birth_date: dt.date | None = None
    dam_id: RecordId | None = None
    sire_id: RecordId | None = None
    notes: str = ""

    @field_validator("name", "earring", "breed", "stage", "notes", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> str:
        return clean_text(value)

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, value: Any) -> Any:
        return value or AnimalType.COW

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, value: Any) -> AnimalStatus:
        if not value:
            return AnimalStatus.ACTIVE
        return AnimalStatus.parse(value) or AnimalStatus.ACTIVE

    @field_validator("birth_date", mode="before")
    @classmethod
    def coerce_birth_date(cls, value: Any) -> dt.date | None:
        return _optional_date(value)

    @field_validator("dam_id", "sire_id", mode="before")
    @classmethod
    def coerce_parent(cls, value: Any) -> Any:
        return blank_to_none(value)


class VaccineDocument(TimestampedDocument):
    id: RecordId
    animal_id: RecordId
    name: str = ""
    applied_at: dt.date | None = None
    next_due_at: dt.date | None = None
    notes: str = ""

    @field_validator("applied_at", "next_due_at", mode="before")
    @classmethod
    def coerce_dates(cls, value: Any) -> dt.date | None:
        return _optional_date(value)

    @field_validator("name", "notes", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> str:
        return clean_text(value)


class MovementDocument(TimestampedDocument):
    id: RecordId
    animal_id: RecordId
    type: MovementType
    date: dt.date
    amount: Decimal | None = None
    notes: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> dt.date:
        return safe_date(value)

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Decimal | None:
        return to_decimal(blank_to_none(value))

    @field_validator("notes", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> str:
        return clean_text(value)


class ReproductiveEventDocument(TimestampedDocument):
    id: RecordId
    animal_id: RecordId
    kind: ReproEventKind
    date: dt.date
    result: str = ""
    calf_sex: str = ""
    notes: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> dt.date:
        return safe_date(value)

    @field_validator("result", "calf_sex", "notes", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> str:
        return clean_text(value)
