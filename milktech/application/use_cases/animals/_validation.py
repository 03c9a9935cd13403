from __future__ import annotations

from typing import Any

from milktech.application.errors import ValidationError
from milktech.domain.value_objects.animal_status import AnimalStatus
from milktech.domain.value_objects.animal_type import AnimalType


def parse_status(value: Any) -> AnimalStatus:
    status = AnimalStatus.parse(value)
    if status is None:
        allowed = ", ".join(s.value for s in AnimalStatus)
        raise ValidationError(f"Status must be one of: {allowed}", details={"status": value})
    return status


def parse_type(value: Any) -> AnimalType:
    if isinstance(value, AnimalType):
        return value
    try:
        return AnimalType(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(t.value for t in AnimalType)
        raise ValidationError(f"Type must be one of: {allowed}", details={"type": value}) from None


def require_text(value: Any, message: str) -> str:
    text = str(value or "").strip()
    if not text:
        raise ValidationError(message)
    return text
