from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import field_validator

from milktech.domain.coercion import clean_text, safe_number
from milktech.domain.value_objects.proportion_type import ProportionType
from milktech.infrastructure.documents.base import RecordId, TimestampedDocument


class FeedRecipeDocument(TimestampedDocument):
    id: RecordId
    owner_id: RecordId
    name: str


class FeedRecipeItemDocument(TimestampedDocument):
    id: RecordId
    recipe_id: RecordId
    ingredient_name: str
    proportion_type: ProportionType = ProportionType.PERCENT
    proportion_value: Decimal = Decimal("0")

    @field_validator("ingredient_name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> str:
        return clean_text(value)

    @field_validator("proportion_type", mode="before")
    @classmethod
    def coerce_type(cls, value: Any) -> Any:
        return value or ProportionType.PERCENT

    @field_validator("proportion_value", mode="before")
    @classmethod
    def coerce_value(cls, value: Any) -> Decimal:
        return safe_number(value, field_name="proportion_value")
