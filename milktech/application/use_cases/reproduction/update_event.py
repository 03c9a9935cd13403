from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.reproduction.record_event import parse_kind
from milktech.domain.coercion import clean_text
from milktech.domain.models.reproductive_event import ReproductiveEvent
from milktech.utils.dates import normalize_date, now_utc


@dataclass(slots=True)
class UpdateEventInput:
    kind: Any = None
    date: Any = None
    result: str | None = None
    calf_sex: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, event_id: str, payload: UpdateEventInput
) -> ReproductiveEvent | None:
    event = await uow.reproductive_events.get(event_id)
    if event is None:
        return None
    if payload.kind:
        event.kind = parse_kind(payload.kind)
    if payload.date:
        event.date = normalize_date(payload.date) or event.date
    if payload.result is not None:
        event.result = clean_text(payload.result)
    if payload.calf_sex is not None:
        event.calf_sex = clean_text(payload.calf_sex).upper()
    if payload.notes is not None:
        event.notes = clean_text(payload.notes)
    event.updated_at = now_utc()
    updated = await uow.reproductive_events.put(event)
    await uow.commit()
    return updated
