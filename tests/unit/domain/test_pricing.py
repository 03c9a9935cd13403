from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from milktech.domain.models.dairy import Dairy
from milktech.domain.models.price_record import PriceRecord
from milktech.domain.services import pricing
from milktech.utils.dates import anchor_datetime


def price_on(dairy_id, the_date: date, value: str) -> PriceRecord:
    return PriceRecord.create(
        dairy_id=dairy_id, price_per_liter=Decimal(value), effective_at=anchor_datetime(the_date)
    )


@pytest.fixture()
def history():
    dairy_id = str(uuid4())
    return [
        price_on(dairy_id, date(2024, 3, 15), "2.50"),
        price_on(dairy_id, date(2024, 3, 1), "2.00"),
    ]


@pytest.mark.parametrize(
    "on, expected",
    [
        (date(2024, 3, 10), Decimal("2.00")),
        (date(2024, 3, 1), Decimal("2.00")),
        (date(2024, 3, 15), Decimal("2.50")),
        (date(2024, 3, 20), Decimal("2.50")),
        # before the whole history: oldest known price
        (date(2024, 2, 1), Decimal("2.00")),
    ],
)
def test_resolve_price(history, on, expected):
    assert pricing.resolve_price(history, on) == expected


def test_resolve_price_ignores_input_order(history):
    assert pricing.resolve_price(list(reversed(history)), date(2024, 3, 10)) == Decimal("2.00")


def test_resolve_price_without_history():
    assert pricing.resolve_price([], date(2024, 3, 10)) is None


def test_latest_price(history):
    assert pricing.latest_price(history).price_per_liter == Decimal("2.50")
    assert pricing.latest_price([]) is None


def test_upsert_same_day_replaces_in_place():
    dairy_id = str(uuid4())
    original = price_on(dairy_id, date(2024, 3, 1), "2.00")
    records = [original]

    history, record = pricing.upsert_same_day(
        records,
        dairy_id=dairy_id,
        price_per_liter=Decimal("2.10"),
        effective_at=datetime(2024, 3, 1, 18, 0, tzinfo=timezone.utc),
    )

    assert len(history) == 1
    assert record.id == original.id
    assert record.created_at == original.created_at
    assert record.price_per_liter == Decimal("2.10")


def test_upsert_same_day_appends_new_day_sorted_desc():
    dairy_id = str(uuid4())
    records = [price_on(dairy_id, date(2024, 3, 1), "2.00")]
    history, record = pricing.upsert_same_day(
        records,
        dairy_id=dairy_id,
        price_per_liter=Decimal("2.20"),
        effective_at=anchor_datetime(date(2024, 3, 5)),
    )
    assert [r.price_per_liter for r in history] == [Decimal("2.20"), Decimal("2.00")]
    assert history[0] is record


def test_replace_record_drops_other_record_on_target_day(history):
    older = history[1]
    moved = replace(history[0], effective_at=older.effective_at)

    result = pricing.replace_record(history, moved)

    assert result == [moved]


def test_replace_record_keeps_other_days(history):
    edited = replace(history[1], price_per_liter=Decimal("2.10"))
    result = pricing.replace_record(history, edited)
    assert [r.price_per_liter for r in result] == [Decimal("2.50"), Decimal("2.10")]


def test_within_official_bounds():
    assert pricing.within_bounds(Decimal("0.50"))
    assert pricing.within_bounds(Decimal("5.00"))
    assert not pricing.within_bounds(Decimal("0.49"))
    assert not pricing.within_bounds(Decimal("5.01"))


def test_rank_dairies_by_latest_price():
    cheap, dear, silent = (Dairy.create(trade_name=n) for n in ("Cheap", "Dear", "Silent"))
    histories = {
        cheap.id: [price_on(cheap.id, date(2024, 3, 1), "2.15")],
        dear.id: [
            price_on(dear.id, date(2024, 2, 1), "1.90"),
            price_on(dear.id, date(2024, 3, 1), "2.25"),
        ],
    }
    ranked = pricing.rank_dairies([cheap, silent, dear], histories)
    assert [s.dairy.trade_name for s in ranked] == ["Dear", "Cheap", "Silent"]
    assert ranked[0].price_per_liter == Decimal("2.25")
    assert ranked[-1].price_per_liter == Decimal("0")
    assert ranked[-1].last_updated is None
    assert len(pricing.rank_dairies([cheap, silent, dear], histories, limit=2)) == 2


def test_effective_datetime_variants():
    assert pricing.effective_datetime("2024-03-01") == anchor_datetime(date(2024, 3, 1))
    assert pricing.effective_datetime(date(2024, 3, 1)) == anchor_datetime(date(2024, 3, 1))
    assert pricing.effective_datetime("2024-03-01T15:00:00Z") == datetime(
        2024, 3, 1, 15, 0, tzinfo=timezone.utc
    )
    fallback = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert pricing.effective_datetime("garbage", default=fallback) == fallback
    assert pricing.effective_datetime(None, default=fallback) == fallback
