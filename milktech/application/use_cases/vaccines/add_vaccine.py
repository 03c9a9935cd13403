from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from milktech.application.errors import NotFound, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import clean_text
from milktech.domain.models.vaccine import Vaccine
from milktech.utils.dates import normalize_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AddVaccineInput:
    name: str
    applied_at: Any = None
    next_due_at: Any = None
    notes: str | None = None


async def execute(uow: UnitOfWork, animal_id: str, payload: AddVaccineInput) -> Vaccine:
    name = clean_text(payload.name)
    if not name:
        raise ValidationError("Vaccine name is required")
    if await uow.animals.get(animal_id) is None:
        raise NotFound(f"Animal {animal_id} not found")
    vaccine = Vaccine.create(
        animal_id=animal_id,
        name=name,
        applied_at=normalize_date(payload.applied_at) if payload.applied_at else None,
        next_due_at=normalize_date(payload.next_due_at) if payload.next_due_at else None,
        notes=clean_text(payload.notes),
    )
    created = await uow.vaccines.add(vaccine)
    await uow.commit()
    logger.debug("Added vaccine %s to animal %s", created.id, animal_id)
    return created
