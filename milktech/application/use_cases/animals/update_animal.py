from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from milktech.application.errors import ConflictError, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.animals._validation import parse_status, parse_type
from milktech.domain.coercion import clean_text
from milktech.domain.models.animal import Animal
from milktech.utils.dates import normalize_date


@dataclass(slots=True)
class UpdateAnimalInput:
    name: str | None = None
    earring: str | None = None
    type: Any = None
    breed: str | None = None
    status: Any = None
    stage: str | None = None
    birth_date: Any = None
    # Genealogy
    dam_id: str | None = None
    sire_id: str | None = None
    notes: str | None = None


async def execute(uow: UnitOfWork, animal_id: str, payload: UpdateAnimalInput) -> Animal | None:
    animal = await uow.animals.get(animal_id)
    if animal is None:
        return None

    if payload.earring is not None:
        earring = payload.earring.strip()
        if not earring:
            raise ValidationError("Earring cannot be empty")
        if await uow.animals.find_by_earring(animal.owner_id, earring, exclude_id=animal.id):
            raise ConflictError(
                f'Earring "{earring}" is already in use', details={"earring": earring}
            )
        animal.earring = earring
    if payload.status:
        animal.status = parse_status(payload.status)
    if payload.type:
        animal.type = parse_type(payload.type)
    if payload.name is not None:
        name = payload.name.strip()
        if not name:
            raise ValidationError("Animal name cannot be empty")
        animal.name = name
    for field_name in ("breed", "stage", "notes"):
        value = getattr(payload, field_name)
        if value is not None:
            setattr(animal, field_name, clean_text(value))
    if payload.birth_date is not None:
        animal.birth_date = normalize_date(payload.birth_date)
    if payload.dam_id is not None:
        animal.dam_id = payload.dam_id
    if payload.sire_id is not None:
        animal.sire_id = payload.sire_id

    animal.touch()
    updated = await uow.animals.put(animal)
    await uow.commit()
    return updated
