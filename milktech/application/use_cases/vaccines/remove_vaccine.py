from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, vaccine_id: str) -> bool:
    removed = await uow.vaccines.delete(vaccine_id)
    if removed:
        await uow.commit()
    return removed
