from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from milktech.application.errors import NotFound, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.movements._validation import parse_movement_type
from milktech.domain.coercion import clean_text, to_decimal
from milktech.domain.models.movement import Movement
from milktech.utils.dates import normalize_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordMovementInput:
    animal_id: str | None
    type: Any
    date: Any
    # purchase or sale value
    amount: Any = None
    notes: str | None = None


async def execute(uow: UnitOfWork, payload: RecordMovementInput) -> Movement:
    if payload.animal_id is None:
        raise ValidationError("animal_id is required")
    the_date = normalize_date(payload.date) if payload.date else None
    if the_date is None:
        raise ValidationError("date is required (YYYY-MM-DD)")
    movement_type = parse_movement_type(payload.type)
    if await uow.animals.get(payload.animal_id) is None:
        raise NotFound(f"Animal {payload.animal_id} not found")

    movement = Movement.create(
        animal_id=payload.animal_id,
        type=movement_type,
        date=the_date,
        amount=to_decimal(payload.amount),
        notes=clean_text(payload.notes),
    )
    created = await uow.movements.add(movement)
    await uow.commit()
    logger.info(
        "Recorded %s for animal %s on %s", movement_type.value, payload.animal_id, the_date
    )
    return created
