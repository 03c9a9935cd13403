from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import clean_text, optional_number, safe_number
from milktech.domain.models.production_entry import ProductionEntry
from milktech.domain.services.ledger import apply_update
from milktech.domain.value_objects.dairy_type import DairyType
from milktech.domain.value_objects.shift import Shift
from milktech.utils.dates import normalize_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateEntryInput:
    """Partial changes; None leaves a field untouched."""

    date: Any = None
    shift: Any = None
    liters: Any = None
    dairy_type: Any = None
    dairy_id: str | None = None
    unit_price_at_sale: Any = None
    notes: str | None = None


def _changes(payload: UpdateEntryInput) -> dict[str, Any]:
    changes: dict[str, Any] = {}
    if payload.date is not None:
        the_date = normalize_date(payload.date)
        if the_date is not None:
            changes["date"] = the_date
    if payload.shift:
        shift = Shift.parse(payload.shift)
        if shift is not None:
            changes["shift"] = shift
    if payload.liters is not None:
        changes["liters"] = safe_number(payload.liters)
    if payload.dairy_type:
        dairy_type = DairyType.parse(payload.dairy_type)
        if dairy_type is not None:
            changes["dairy_type"] = dairy_type
    if payload.dairy_id is not None:
        changes["dairy_id"] = payload.dairy_id
    if payload.unit_price_at_sale is not None:
        changes["unit_price_at_sale"] = optional_number(payload.unit_price_at_sale)
    if payload.notes is not None:
        changes["notes"] = clean_text(payload.notes)
    return changes


async def execute(
    uow: UnitOfWork, entry_id: str, payload: UpdateEntryInput
) -> ProductionEntry | None:
    entries = await uow.production_entries.all()
    updated = apply_update(entries, entry_id, _changes(payload))
    if updated is None:
        return None
    await uow.production_entries.replace_all(entries)
    await uow.commit()
    if updated.id != entry_id:
        logger.info("Production entry %s merged into %s", entry_id, updated.id)
    else:
        logger.debug("Updated production entry %s", entry_id)
    return updated
