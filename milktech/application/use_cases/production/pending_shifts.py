from __future__ import annotations

from datetime import date

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.services.ledger import pending_shifts
from milktech.utils.dates import today


async def execute(uow: UnitOfWork, owner_id: str, on: date | None = None) -> int:
    """Shifts (0..2) still missing a production entry on `on`, today by default."""
    on = on or today()
    entries = await uow.production_entries.list(owner_id, date_from=on, date_to=on)
    return pending_shifts(entries, owner_id, on)
