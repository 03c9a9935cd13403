from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.movements._validation import parse_movement_type
from milktech.domain.coercion import clean_text, to_decimal
from milktech.domain.models.movement import Movement
from milktech.utils.dates import normalize_date, now_utc

UNSET: Any = object()


@dataclass(slots=True)
class UpdateMovementInput:
    type: Any = None
    date: Any = None
    # UNSET keeps the amount; None clears it
    amount: Any = UNSET
    notes: str | None = None


async def execute(
    uow: UnitOfWork, movement_id: str, payload: UpdateMovementInput
) -> Movement | None:
    movement = await uow.movements.get(movement_id)
    if movement is None:
        return None
    if payload.type:
        movement.type = parse_movement_type(payload.type)
    if payload.date:
        movement.date = normalize_date(payload.date) or movement.date
    if payload.amount is not UNSET:
        movement.amount = to_decimal(payload.amount)
    if payload.notes is not None:
        movement.notes = clean_text(payload.notes)
    movement.updated_at = now_utc()
    updated = await uow.movements.put(movement)
    await uow.commit()
    return updated
