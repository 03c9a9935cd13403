from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import clean_text
from milktech.domain.models.vaccine import Vaccine
from milktech.utils.dates import normalize_date, now_utc


@dataclass(slots=True)
class UpdateVaccineInput:
    name: str | None = None
    # "" clears a date
    applied_at: Any = None
    next_due_at: Any = None
    notes: str | None = None


async def execute(uow: UnitOfWork, vaccine_id: str, payload: UpdateVaccineInput) -> Vaccine | None:
    vaccine = await uow.vaccines.get(vaccine_id)
    if vaccine is None:
        return None
    if payload.name is not None and payload.name.strip():
        vaccine.name = payload.name.strip()
    if payload.applied_at is not None:
        vaccine.applied_at = normalize_date(payload.applied_at)
    if payload.next_due_at is not None:
        vaccine.next_due_at = normalize_date(payload.next_due_at)
    if payload.notes is not None:
        vaccine.notes = clean_text(payload.notes)
    vaccine.updated_at = now_utc()
    updated = await uow.vaccines.put(vaccine)
    await uow.commit()
    return updated
