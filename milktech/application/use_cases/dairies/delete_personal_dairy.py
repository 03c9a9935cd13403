from __future__ import annotations

import logging

from milktech.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, dairy_id: str) -> bool:
    """Delete a personal dairy and its price history."""
    deleted = await uow.personal_dairies.delete(dairy_id)
    await uow.personal_prices.delete_for_dairy(dairy_id)
    await uow.commit()
    if deleted:
        logger.info("Deleted personal dairy %s", dairy_id)
    return deleted
