from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any

from milktech.domain.models.production_entry import ProductionEntry
from milktech.domain.value_objects.dairy_type import DairyType
from milktech.domain.value_objects.shift import Shift

ZERO = Decimal("0")

PriceLookup = Callable[[ProductionEntry], Decimal | None]


@dataclass(slots=True)
class DailyProduction:
    date: date
    morning_liters: Decimal = ZERO
    afternoon_liters: Decimal = ZERO
    gross_revenue: Decimal = ZERO
    items: list[ProductionEntry] = field(default_factory=list)

    @property
    def total_liters(self) -> Decimal:
        return self.morning_liters + self.afternoon_liters


@dataclass(slots=True)
class ProductionTotals:
    morning: Decimal = ZERO
    afternoon: Decimal = ZERO
    gross_revenue: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        return self.morning + self.afternoon


def sort_entries(entries: Iterable[ProductionEntry]) -> list[ProductionEntry]:
    """Most recent day first; morning before afternoon within a day."""
    return sorted(entries, key=lambda e: (-e.date.toordinal(), e.shift.sort_key))


def filter_range(
    entries: Iterable[ProductionEntry],
    owner_id: str,
    *,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[ProductionEntry]:
    result = []
    for entry in entries:
        if entry.owner_id != owner_id:
            continue
        if date_from is not None and entry.date < date_from:
            continue
        if date_to is not None and entry.date > date_to:
            continue
        result.append(entry)
    return result


def find_by_natural_key(
    entries: list[ProductionEntry],
    owner_id: str,
    the_date: date,
    shift: Shift,
    *,
    exclude_index: int | None = None,
) -> int | None:
    for idx, entry in enumerate(entries):
        if idx == exclude_index:
            continue
        if entry.natural_key == (owner_id, the_date, shift):
            return idx
    return None


def apply_upsert(
    entries: list[ProductionEntry],
    *,
    owner_id: str,
    the_date: date,
    shift: Shift,
    liters: Decimal,
    dairy_type: DairyType | None,
    dairy_id: str | None,
    unit_price_at_sale: Decimal | None,
    notes: str,
) -> tuple[ProductionEntry, bool]:
    """Insert or overwrite the entry for (owner, date, shift) in `entries`.

    Returns the resulting entry and whether it was newly created. An existing
    stamped price is only replaced when a new one is given.
    """
    idx = find_by_natural_key(entries, owner_id, the_date, shift)
    if idx is not None:
        current = entries[idx]
        nxt = replace(
            current,
            liters=liters,
            dairy_type=dairy_type,
            dairy_id=dairy_id,
            notes=notes,
            unit_price_at_sale=(
                unit_price_at_sale if unit_price_at_sale is not None else current.unit_price_at_sale
            ),
            updated_at=datetime.now(timezone.utc),
        )
        entries[idx] = nxt
        return nxt, False
    entry = ProductionEntry.create(
        owner_id=owner_id,
        date=the_date,
        shift=shift,
        liters=liters,
        dairy_type=dairy_type,
        dairy_id=dairy_id,
        unit_price_at_sale=unit_price_at_sale,
        notes=notes,
    )
    entries.append(entry)
    return entry, True


def apply_update(
    entries: list[ProductionEntry], entry_id: str, changes: Mapping[str, Any]
) -> ProductionEntry | None:
    """Apply `changes` to the entry with `entry_id`.

    When the changed (date, shift) lands on another entry of the same owner,
    that entry takes the new values under its own id and created_at, and the
    edited entry is dropped.
    """
    idx = next((i for i, e in enumerate(entries) if e.id == entry_id), None)
    if idx is None:
        return None
    nxt = replace(entries[idx], **changes, updated_at=datetime.now(timezone.utc))
    conflict = find_by_natural_key(entries, nxt.owner_id, nxt.date, nxt.shift, exclude_index=idx)
    if conflict is None:
        entries[idx] = nxt
        return nxt
    survivor = replace(nxt, id=entries[conflict].id, created_at=entries[conflict].created_at)
    entries[conflict] = survivor
    del entries[idx]
    return survivor


def aggregate_by_day(
    entries: Iterable[ProductionEntry], price_for: PriceLookup
) -> list[DailyProduction]:
    """Group entries per day, oldest day first.

    Gross revenue per entry is liters times the entry's stamped price, or
    `price_for(entry)` when none was stamped; unknown prices contribute zero.
    """
    days: dict[date, DailyProduction] = {}
    for entry in sort_entries(entries):
        day = days.get(entry.date)
        if day is None:
            day = days[entry.date] = DailyProduction(date=entry.date)
        day.items.append(entry)
        if entry.shift is Shift.MORNING:
            day.morning_liters += entry.liters
        else:
            day.afternoon_liters += entry.liters
        unit_price = entry.unit_price_at_sale
        if unit_price is None:
            unit_price = price_for(entry)
        if unit_price is not None:
            day.gross_revenue += entry.liters * unit_price
    return [days[d] for d in sorted(days)]


def sum_days(days: Iterable[DailyProduction]) -> ProductionTotals:
    totals = ProductionTotals()
    for day in days:
        totals.morning += day.morning_liters
        totals.afternoon += day.afternoon_liters
        totals.gross_revenue += day.gross_revenue
    return totals


def pending_shifts(entries: Iterable[ProductionEntry], owner_id: str, on: date) -> int:
    logged = {e.shift for e in entries if e.owner_id == owner_id and e.date == on}
    return sum(1 for shift in Shift if shift not in logged)
