from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any

from pydantic import field_validator

from milktech.domain.coercion import clean_text, optional_number, safe_date, safe_number
from milktech.domain.value_objects.dairy_type import DairyType
from milktech.domain.value_objects.shift import Shift
from milktech.infrastructure.documents.base import RecordId, TimestampedDocument, blank_to_none


class ProductionEntryDocument(TimestampedDocument):
    id: RecordId
    owner_id: RecordId
    date: dt.date
    # records written before shifts existed were morning-only
    shift: Shift = Shift.MORNING
    liters: Decimal = Decimal("0")
    dairy_type: DairyType | None = None
    dairy_id: RecordId | None = None
    unit_price_at_sale: Decimal | None = None
    notes: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> dt.date:
        return safe_date(value)

    @field_validator("shift", mode="before")
    @classmethod
    def coerce_shift(cls, value: Any) -> Shift:
        return Shift.parse(value) or Shift.MORNING

    @field_validator("liters", mode="before")
    @classmethod
    def coerce_liters(cls, value: Any) -> Decimal:
        return safe_number(value)

    @field_validator("unit_price_at_sale", mode="before")
    @classmethod
    def coerce_price(cls, value: Any) -> Decimal | None:
        return optional_number(value)

    @field_validator("dairy_type", mode="before")
    @classmethod
    def coerce_dairy_type(cls, value: Any) -> Any:
        value = blank_to_none(value)
        if value is None or isinstance(value, DairyType):
            return value
        return value if value in {t.value for t in DairyType} else None

    @field_validator("dairy_id", mode="before")
    @classmethod
    def coerce_dairy_id(cls, value: Any) -> Any:
        return blank_to_none(value)

    @field_validator("notes", mode="before")
    @classmethod
    def coerce_notes(cls, value: Any) -> str:
        return clean_text(value)
