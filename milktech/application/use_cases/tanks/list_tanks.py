from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.tank import Tank


async def execute(uow: UnitOfWork, dairy_id: str) -> list[Tank]:
    return await uow.tanks.list_by_dairy(dairy_id)


async def search(uow: UnitOfWork, term: str | None = None) -> list[Tank]:
    """All tanks, or those whose city or state contains `term`."""
    tanks = await uow.tanks.all()
    if not term or not term.strip():
        return tanks
    return [t for t in tanks if t.matches_location(term)]
