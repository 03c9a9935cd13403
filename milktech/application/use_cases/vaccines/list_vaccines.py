from __future__ import annotations

from datetime import date

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.vaccine import Vaccine


async def execute(uow: UnitOfWork, animal_id: str) -> list[Vaccine]:
    """Vaccines of one animal, most recently applied first."""
    vaccines = await uow.vaccines.list_by_animal(animal_id)
    return sorted(vaccines, key=lambda v: v.applied_at or date.min, reverse=True)
