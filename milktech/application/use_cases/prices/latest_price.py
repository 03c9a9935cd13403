from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.price_record import PriceRecord
from milktech.domain.services.pricing import latest_price
from milktech.domain.value_objects.dairy_type import DairyType


async def execute(
    uow: UnitOfWork, dairy_id: str, dairy_type: DairyType | None = None
) -> PriceRecord | None:
    return latest_price(await uow.price_history(dairy_type).list_for_dairy(dairy_id))
