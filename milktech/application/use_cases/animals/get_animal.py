from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.animal import Animal


async def execute(uow: UnitOfWork, animal_id: str) -> Animal | None:
    return await uow.animals.get(animal_id)
