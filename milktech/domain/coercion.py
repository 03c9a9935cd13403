"""Fallbacks applied to malformed numeric/date input.

Fields listed here never reject bad input: the value is replaced by the
fallback below so a record can always be stored and read back.

    field                 fallback
    --------------------  -------------------------------
    liters                Decimal("0") (also for negatives)
    unit_price_at_sale    None when missing, else safe_number
    price_per_liter       Decimal("0")
    proportion_value      Decimal("0")
    amount                None
    date                  today (local calendar day)
    shift                 "morning" (legacy records without a shift)
    notes                 ""
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from milktech.utils.dates import normalize_date, today

ZERO = Decimal("0")

FALLBACKS: dict[str, Any] = {
    "liters": ZERO,
    "unit_price_at_sale": None,
    "price_per_liter": ZERO,
    "proportion_value": ZERO,
    "amount": None,
    "date": today,
    "shift": "morning",
    "notes": "",
}


def fallback_for(field_name: str) -> Any:
    value = FALLBACKS[field_name]
    return value() if callable(value) else value


def to_decimal(value: Any) -> Decimal | None:
    """Parse `value` into a finite Decimal, accepting comma decimal separators."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(repr(value))
    elif isinstance(value, str):
        text = value.strip().replace(",", ".")
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None
    if not number.is_finite():
        return None
    return number


def safe_number(value: Any, *, field_name: str = "liters") -> Decimal:
    """Non-negative finite Decimal, or the field's fallback."""
    number = to_decimal(value)
    if number is None:
        return fallback_for(field_name) or ZERO
    return max(number, ZERO)


def optional_number(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    return safe_number(value, field_name="unit_price_at_sale")


def safe_date(value: Any) -> date:
    return normalize_date(value) or fallback_for("date")


def clean_text(value: Any) -> str:
    if value is None:
        return fallback_for("notes")
    return str(value).strip()
