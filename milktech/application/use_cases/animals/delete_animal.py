from __future__ import annotations

import logging

from milktech.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, animal_id: str) -> bool:
    """Delete an animal together with its vaccines, movements and reproductive events."""
    deleted = await uow.animals.delete(animal_id)
    if not deleted:
        return False
    vaccines = await uow.vaccines.delete_by_animal(animal_id)
    movements = await uow.movements.delete_by_animal(animal_id)
    events = await uow.reproductive_events.delete_by_animal(animal_id)
    await uow.commit()
    logger.info(
        "Deleted animal %s (%d vaccines, %d movements, %d reproductive events)",
        animal_id,
        vaccines,
        movements,
        events,
    )
    return True
