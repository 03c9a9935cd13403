from __future__ import annotations

from datetime import date

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.production_entry import ProductionEntry


async def execute(
    uow: UnitOfWork,
    owner_id: str,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[ProductionEntry]:
    return await uow.production_entries.list(owner_id, date_from=date_from, date_to=date_to)
