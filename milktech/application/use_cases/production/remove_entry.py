from __future__ import annotations

import logging

from milktech.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, entry_id: str) -> bool:
    removed = await uow.production_entries.delete(entry_id)
    if removed:
        await uow.commit()
        logger.info("Removed production entry %s", entry_id)
    return removed
