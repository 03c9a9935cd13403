from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork


async def execute(
    uow: UnitOfWork, owner_id: str, earring: str, ignore_id: str | None = None
) -> bool:
    if not earring or not earring.strip():
        return False
    return await uow.animals.find_by_earring(owner_id, earring, exclude_id=ignore_id) is None
