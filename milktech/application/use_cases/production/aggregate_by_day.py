from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.price_record import PriceRecord
from milktech.domain.models.production_entry import ProductionEntry
from milktech.domain.services.ledger import DailyProduction, PriceLookup, aggregate_by_day
from milktech.domain.services.pricing import resolve_price
from milktech.domain.value_objects.dairy_type import DairyType


async def load_price_lookup(uow: UnitOfWork, entries: Iterable[ProductionEntry]) -> PriceLookup:
    """Fetch each referenced dairy's history once and resolve prices per entry date.

    Entries without a dairy type are priced against the official history.
    """
    histories: dict[tuple[DairyType, str], list[PriceRecord]] = {}
    for entry in entries:
        if entry.unit_price_at_sale is not None or entry.dairy_id is None:
            continue
        dairy_type = entry.dairy_type or DairyType.OFFICIAL
        cache_key = (dairy_type, entry.dairy_id)
        if cache_key not in histories:
            repo = uow.price_history(dairy_type)
            histories[cache_key] = await repo.list_for_dairy(entry.dairy_id)

    def price_for(entry: ProductionEntry) -> Decimal | None:
        if entry.dairy_id is None:
            return None
        records = histories.get((entry.dairy_type or DairyType.OFFICIAL, entry.dairy_id), [])
        return resolve_price(records, entry.date)

    return price_for


async def execute(
    uow: UnitOfWork,
    owner_id: str,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[DailyProduction]:
    entries = await uow.production_entries.list(owner_id, date_from=date_from, date_to=date_to)
    price_for = await load_price_lookup(uow, entries)
    return aggregate_by_day(entries, price_for)
