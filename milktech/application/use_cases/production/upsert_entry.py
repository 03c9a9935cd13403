from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from milktech.application.errors import ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import clean_text, optional_number, safe_number
from milktech.domain.models.production_entry import ProductionEntry
from milktech.domain.services.ledger import apply_upsert
from milktech.domain.value_objects.dairy_type import DairyType
from milktech.domain.value_objects.shift import Shift
from milktech.utils.dates import normalize_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpsertEntryInput:
    date: Any
    shift: Any
    liters: Any = 0
    dairy_type: Any = None
    dairy_id: str | None = None
    unit_price_at_sale: Any = None
    notes: str | None = None


async def execute(uow: UnitOfWork, owner_id: str, payload: UpsertEntryInput) -> ProductionEntry:
    the_date = normalize_date(payload.date) if payload.date else None
    if the_date is None:
        raise ValidationError("date is required")
    shift = Shift.parse(payload.shift) if payload.shift else None
    if shift is None:
        raise ValidationError(
            "shift must be 'morning' or 'afternoon'", details={"shift": payload.shift}
        )

    entries = await uow.production_entries.all()
    entry, created = apply_upsert(
        entries,
        owner_id=owner_id,
        the_date=the_date,
        shift=shift,
        liters=safe_number(payload.liters),
        dairy_type=DairyType.parse(payload.dairy_type) if payload.dairy_type else None,
        dairy_id=payload.dairy_id,
        unit_price_at_sale=optional_number(payload.unit_price_at_sale),
        notes=clean_text(payload.notes),
    )
    await uow.production_entries.replace_all(entries)
    await uow.commit()
    logger.info(
        "%s production entry %s (%s %s, %s L)",
        "Created" if created else "Updated",
        entry.id,
        entry.date,
        entry.shift.value,
        entry.liters,
    )
    return entry
