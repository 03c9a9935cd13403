from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.animal import Animal
from milktech.domain.value_objects.animal_status import AnimalStatus
from milktech.domain.value_objects.animal_type import AnimalType


async def execute(
    uow: UnitOfWork,
    owner_id: str,
    *,
    status: AnimalStatus | None = None,
    type: AnimalType | None = None,
    search: str | None = None,
) -> list[Animal]:
    """Owner's animals sorted by name.

    `search` matches a case-insensitive substring of the name or earring.
    """
    animals = await uow.animals.list(owner_id)
    if status is not None:
        animals = [a for a in animals if a.status is status]
    if type is not None:
        animals = [a for a in animals if a.type is type]
    needle = (search or "").strip().lower()
    if needle:
        animals = [
            a for a in animals if needle in a.name.lower() or needle in a.earring.lower()
        ]
    return animals


async def list_active(uow: UnitOfWork, owner_id: str) -> list[Animal]:
    return await execute(uow, owner_id, status=AnimalStatus.ACTIVE)


async def list_by_type(uow: UnitOfWork, owner_id: str, type: AnimalType) -> list[Animal]:
    return await execute(uow, owner_id, type=type)


async def search(uow: UnitOfWork, owner_id: str, query: str) -> list[Animal]:
    return await execute(uow, owner_id, search=query)
