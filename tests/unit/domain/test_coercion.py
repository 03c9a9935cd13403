from __future__ import annotations

from decimal import Decimal

import pytest

from milktech.domain import coercion
from milktech.utils.dates import today


@pytest.mark.parametrize(
    "raw, expected",
    [
        (10, Decimal("10")),
        ("12.5", Decimal("12.5")),
        ("12,5", Decimal("12.5")),
        (1.1, Decimal("1.1")),
        ("-3", Decimal("0")),
        ("abc", Decimal("0")),
        (None, Decimal("0")),
        ("", Decimal("0")),
        (float("nan"), Decimal("0")),
        (float("inf"), Decimal("0")),
        (True, Decimal("0")),
    ],
)
def test_safe_number(raw, expected):
    assert coercion.safe_number(raw) == expected


def test_optional_number_keeps_missing_as_none():
    assert coercion.optional_number(None) is None
    assert coercion.optional_number("") is None
    assert coercion.optional_number("2,35") == Decimal("2.35")
    assert coercion.optional_number("oops") == Decimal("0")


def test_safe_date_falls_back_to_today():
    assert coercion.safe_date("garbage") == today()
    assert str(coercion.safe_date("2024-03-01")) == "2024-03-01"


def test_fallback_table_is_consulted():
    assert coercion.fallback_for("shift") == "morning"
    assert coercion.fallback_for("notes") == ""
    assert coercion.fallback_for("amount") is None


def test_clean_text():
    assert coercion.clean_text("  Mimosa ") == "Mimosa"
    assert coercion.clean_text(None) == ""
