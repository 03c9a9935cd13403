from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.reproductive_event import ReproductiveEvent


async def execute(uow: UnitOfWork, animal_id: str) -> list[ReproductiveEvent]:
    events = await uow.reproductive_events.list_by_animal(animal_id)
    return sorted(events, key=lambda e: e.date)
