from __future__ import annotations

from typing import Any

from milktech.application.errors import ValidationError
from milktech.domain.value_objects.movement_type import MovementType


def parse_movement_type(value: Any) -> MovementType:
    if isinstance(value, MovementType):
        return value
    try:
        return MovementType(str(value or "").strip().lower())
    except ValueError:
        allowed = ", ".join(t.value for t in MovementType)
        raise ValidationError(
            f"Movement type must be one of: {allowed}", details={"type": value}
        ) from None
