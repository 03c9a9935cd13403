from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, movement_id: str) -> bool:
    removed = await uow.movements.delete(movement_id)
    if removed:
        await uow.commit()
    return removed
