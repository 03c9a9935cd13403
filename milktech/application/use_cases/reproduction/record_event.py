from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from milktech.application.errors import NotFound, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import clean_text
from milktech.domain.models.reproductive_event import ReproductiveEvent
from milktech.domain.value_objects.reproduction import ReproEventKind
from milktech.utils.dates import normalize_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordEventInput:
    animal_id: str | None
    kind: Any
    date: Any
    # diagnosis: positivo/negativo; calving: vivo/morto
    result: str | None = None
    calf_sex: str | None = None
    notes: str | None = None


def parse_kind(value: Any) -> ReproEventKind:
    if isinstance(value, ReproEventKind):
        return value
    try:
        return ReproEventKind(str(value or "").strip().lower())
    except ValueError:
        allowed = ", ".join(k.value for k in ReproEventKind)
        raise ValidationError(
            f"Event kind must be one of: {allowed}", details={"kind": value}
        ) from None


async def execute(uow: UnitOfWork, payload: RecordEventInput) -> ReproductiveEvent:
    if payload.animal_id is None:
        raise ValidationError("animal_id is required")
    the_date = normalize_date(payload.date) if payload.date else None
    if the_date is None:
        raise ValidationError("date is required (YYYY-MM-DD)")
    kind = parse_kind(payload.kind)
    if await uow.animals.get(payload.animal_id) is None:
        raise NotFound(f"Animal {payload.animal_id} not found")

    event = ReproductiveEvent.create(
        animal_id=payload.animal_id,
        kind=kind,
        date=the_date,
        result=clean_text(payload.result),
        calf_sex=clean_text(payload.calf_sex).upper(),
        notes=clean_text(payload.notes),
    )
    created = await uow.reproductive_events.add(event)
    await uow.commit()
    logger.info("Recorded %s for animal %s on %s", kind.value, payload.animal_id, the_date)
    return created
