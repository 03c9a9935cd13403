from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import field_validator

from milktech.domain.coercion import safe_number
from milktech.infrastructure.documents.base import RecordId, TimestampedDocument
from milktech.utils.dates import anchor_datetime, is_valid_date_string, normalize_date, to_utc


class PriceRecordDocument(TimestampedDocument):
    id: RecordId
    dairy_id: RecordId
    price_per_liter: Decimal
    effective_at: datetime

    @field_validator("price_per_liter", mode="before")
    @classmethod
    def coerce_price(cls, value: Any) -> Decimal:
        return safe_number(value, field_name="price_per_liter")

    @field_validator("effective_at", mode="before")
    @classmethod
    def coerce_effective_at(cls, value: Any) -> Any:
        # older records may carry a bare YYYY-MM-DD
        if is_valid_date_string(value):
            the_date = normalize_date(value)
            return anchor_datetime(the_date) if the_date else value
        return value

    @field_validator("effective_at")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        return to_utc(value)
