from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from milktech.application.errors import ConflictError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.animals._validation import (
    parse_status,
    parse_type,
    require_text,
)
from milktech.domain.coercion import clean_text
from milktech.domain.models.animal import Animal
from milktech.domain.value_objects.animal_status import AnimalStatus
from milktech.domain.value_objects.animal_type import AnimalType
from milktech.utils.dates import normalize_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateAnimalInput:
    name: str
    earring: str
    type: Any = None
    breed: str | None = None
    status: Any = None
    stage: str | None = None
    birth_date: Any = None
    # Genealogy
    dam_id: str | None = None
    sire_id: str | None = None
    notes: str | None = None


async def execute(uow: UnitOfWork, owner_id: str, payload: CreateAnimalInput) -> Animal:
    name = require_text(payload.name, "Animal name is required")
    earring = require_text(payload.earring, "Earring is required")
    status = parse_status(payload.status) if payload.status else AnimalStatus.ACTIVE
    animal_type = parse_type(payload.type) if payload.type else AnimalType.COW
    if await uow.animals.find_by_earring(owner_id, earring):
        raise ConflictError(f'Earring "{earring}" is already in use', details={"earring": earring})

    animal = Animal.create(
        owner_id=owner_id,
        name=name,
        earring=earring,
        type=animal_type,
        breed=clean_text(payload.breed),
        status=status,
        stage=clean_text(payload.stage),
        birth_date=normalize_date(payload.birth_date) if payload.birth_date else None,
        dam_id=payload.dam_id,
        sire_id=payload.sire_id,
        notes=clean_text(payload.notes),
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    logger.info("Created animal %s (earring %s)", created.id, created.earring)
    return created
