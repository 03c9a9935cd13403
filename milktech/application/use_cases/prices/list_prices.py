from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.price_record import PriceRecord
from milktech.domain.value_objects.dairy_type import DairyType


async def execute(
    uow: UnitOfWork, dairy_id: str, dairy_type: DairyType | None = None
) -> list[PriceRecord]:
    """Price history of a dairy, most recent first."""
    return await uow.price_history(dairy_type).list_for_dairy(dairy_id)
