from __future__ import annotations

from decimal import Decimal
from typing import Any

from milktech.application.errors import ValidationError
from milktech.domain.coercion import safe_number
from milktech.domain.services.feed import clamp_proportion
from milktech.domain.value_objects.proportion_type import ProportionType


def parse_proportion_type(value: Any) -> ProportionType:
    if isinstance(value, ProportionType):
        return value
    try:
        return ProportionType(str(value or ProportionType.PERCENT.value).strip().lower())
    except ValueError:
        raise ValidationError(
            "Proportion type must be 'percent' or 'kg'", details={"proportion_type": value}
        ) from None


def proportion_value(proportion_type: ProportionType, value: Any) -> Decimal:
    return clamp_proportion(proportion_type, safe_number(value, field_name="proportion_value"))
