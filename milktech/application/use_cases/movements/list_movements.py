from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.movement import Movement

RECENT_MOVEMENTS_LIMIT = 3


async def execute(uow: UnitOfWork, animal_id: str) -> list[Movement]:
    """Movements of one animal, oldest first."""
    movements = await uow.movements.list_by_animal(animal_id)
    return sorted(movements, key=lambda m: m.date)


async def recent_for_animal(
    uow: UnitOfWork, animal_id: str, limit: int = RECENT_MOVEMENTS_LIMIT
) -> list[Movement]:
    movements = await uow.movements.list_by_animal(animal_id)
    return sorted(movements, key=lambda m: m.date, reverse=True)[:limit]
