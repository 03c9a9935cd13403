from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from decimal import Decimal

from milktech.domain.models.dairy import Dairy
from milktech.domain.models.price_record import PriceRecord
from milktech.utils.dates import anchor_datetime, is_valid_date_string, normalize_date, to_utc

# Accepted range for prices published by official dairies (R$ per liter)
OFFICIAL_PRICE_BOUNDS = (Decimal("0.50"), Decimal("5.00"))


@dataclass(slots=True)
class DairyPriceSummary:
    dairy: Dairy
    price_per_liter: Decimal
    last_updated: datetime | None


def sort_history(records: Iterable[PriceRecord]) -> list[PriceRecord]:
    """Most recent effective_at first."""
    return sorted(records, key=lambda r: r.effective_at, reverse=True)


def latest_price(records: Iterable[PriceRecord]) -> PriceRecord | None:
    ordered = sort_history(records)
    return ordered[0] if ordered else None


def resolve_price(records: Sequence[PriceRecord], on: date) -> Decimal | None:
    """Price per liter in effect on `on`.

    Falls back to the oldest record when `on` predates the whole history;
    returns None only when there is no history at all.
    """
    ordered = sort_history(records)
    if not ordered:
        return None
    for record in ordered:
        if record.effective_date <= on:
            return record.price_per_liter
    return ordered[-1].price_per_liter


def upsert_same_day(
    records: list[PriceRecord],
    *,
    dairy_id: str,
    price_per_liter: Decimal,
    effective_at: datetime,
) -> tuple[list[PriceRecord], PriceRecord]:
    """Add a price, replacing any record already effective on the same day.

    The replaced record keeps its id and created_at. The returned history is
    sorted most recent first.
    """
    effective_at = to_utc(effective_at)
    candidate = PriceRecord.create(
        dairy_id=dairy_id, price_per_liter=price_per_liter, effective_at=effective_at
    )
    same_day = next(
        (i for i, r in enumerate(records) if r.effective_date == candidate.effective_date), None
    )
    if same_day is not None:
        current = records[same_day]
        candidate = replace(
            candidate,
            id=current.id,
            created_at=current.created_at,
            updated_at=datetime.now(timezone.utc),
        )
        records[same_day] = candidate
    else:
        records.append(candidate)
    return sort_history(records), candidate


def replace_record(records: Iterable[PriceRecord], updated: PriceRecord) -> list[PriceRecord]:
    """Swap in `updated` for the record with its id.

    Any other record effective on the same day is dropped, so the edited
    values win. The returned history is sorted most recent first.
    """
    kept = [
        r for r in records if r.id != updated.id and r.effective_date != updated.effective_date
    ]
    return sort_history([*kept, updated])


def within_bounds(price: Decimal, bounds: tuple[Decimal, Decimal] = OFFICIAL_PRICE_BOUNDS) -> bool:
    low, high = bounds
    return low <= price <= high


def rank_dairies(
    dairies: Iterable[Dairy],
    histories: Mapping[str, Sequence[PriceRecord]],
    *,
    limit: int | None = None,
) -> list[DairyPriceSummary]:
    """Dairies ordered by their latest price, highest first.

    Dairies without any price rank last with a zero price.
    """
    summaries = []
    for dairy in dairies:
        latest = latest_price(histories.get(dairy.id, ()))
        summaries.append(
            DairyPriceSummary(
                dairy=dairy,
                price_per_liter=latest.price_per_liter if latest else Decimal("0"),
                last_updated=latest.effective_at if latest else None,
            )
        )
    summaries.sort(key=lambda s: s.price_per_liter, reverse=True)
    return summaries[:limit] if limit is not None else summaries


def effective_datetime(value: object, *, default: datetime | None = None) -> datetime:
    """Instant a price takes effect.

    A bare calendar date is anchored at noon so it stays on the same local
    day; unparseable or missing input falls back to `default` (now).
    """
    if isinstance(value, datetime):
        return to_utc(value)
    the_date = normalize_date(value) if isinstance(value, (date, str)) and value else None
    if the_date is not None:
        if isinstance(value, str) and not is_valid_date_string(value.strip()):
            return to_utc(datetime.fromisoformat(value.strip().replace("Z", "+00:00")))
        return anchor_datetime(the_date)
    return default or datetime.now(timezone.utc)
