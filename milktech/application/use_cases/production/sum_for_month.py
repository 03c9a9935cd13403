from __future__ import annotations

from milktech.application.errors import ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.production import aggregate_by_day
from milktech.domain.services.ledger import ProductionTotals, sum_days
from milktech.utils.dates import month_bounds


async def execute(uow: UnitOfWork, owner_id: str, year: int, month: int) -> ProductionTotals:
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12", details={"month": month})
    first, last = month_bounds(year, month)
    days = await aggregate_by_day.execute(uow, owner_id, date_from=first, date_to=last)
    return sum_days(days)
