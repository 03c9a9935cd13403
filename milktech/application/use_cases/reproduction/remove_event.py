from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, event_id: str) -> bool:
    removed = await uow.reproductive_events.delete(event_id)
    if removed:
        await uow.commit()
    return removed
