from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.services.pricing import DairyPriceSummary, rank_dairies

TOP_DAIRIES_LIMIT = 3


async def execute(
    uow: UnitOfWork, limit: int | None = TOP_DAIRIES_LIMIT
) -> list[DairyPriceSummary]:
    """Official dairies ordered by their latest published price."""
    dairies = await uow.dairies.all()
    histories = {d.id: await uow.official_prices.list_for_dairy(d.id) for d in dairies}
    return rank_dairies(dairies, histories, limit=limit)
