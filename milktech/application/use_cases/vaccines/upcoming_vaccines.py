from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.animal import Animal
from milktech.domain.models.vaccine import Vaccine
from milktech.utils.dates import today

UPCOMING_VACCINES_LIMIT = 5


@dataclass(slots=True)
class UpcomingVaccine:
    vaccine: Vaccine
    animal: Animal
    days_until: int


async def execute(
    uow: UnitOfWork,
    owner_id: str,
    *,
    reference: date | None = None,
    limit: int = UPCOMING_VACCINES_LIMIT,
) -> list[UpcomingVaccine]:
    """Doses due strictly after `reference` (today) for the owner's animals, soonest first."""
    reference = reference or today()
    animals = {a.id: a for a in await uow.animals.list(owner_id)}
    upcoming = [
        UpcomingVaccine(
            vaccine=v,
            animal=animals[v.animal_id],
            days_until=(v.next_due_at - reference).days,
        )
        for v in await uow.vaccines.all()
        if v.animal_id in animals and v.next_due_at is not None and v.next_due_at > reference
    ]
    upcoming.sort(key=lambda u: u.vaccine.next_due_at)
    return upcoming[:limit]
