from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.prices.record_personal_price import get_owned_dairy


async def execute(uow: UnitOfWork, owner_id: str, dairy_id: str, price_id: str) -> bool:
    dairy = await get_owned_dairy(uow, owner_id, dairy_id)
    records = await uow.personal_prices.list_for_dairy(dairy.id)
    kept = [r for r in records if r.id != price_id]
    if len(kept) == len(records):
        return False
    await uow.personal_prices.save_for_dairy(dairy.id, kept)
    await uow.commit()
    return True
