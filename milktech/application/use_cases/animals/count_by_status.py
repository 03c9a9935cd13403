from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.value_objects.animal_status import AnimalStatus


async def execute(uow: UnitOfWork, owner_id: str) -> dict[AnimalStatus, int]:
    counts = {status: 0 for status in AnimalStatus}
    for animal in await uow.animals.list(owner_id):
        counts[animal.status] += 1
    return counts
