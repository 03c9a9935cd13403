from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.services.reproduction import ReproductiveState, infer_state


async def execute(uow: UnitOfWork, animal_id: str) -> ReproductiveState:
    """Current reproductive state, derived from the animal's events on every call."""
    return infer_state(await uow.reproductive_events.list_by_animal(animal_id))
