from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.prices import rank_dairies
from milktech.application.use_cases.production import aggregate_by_day
from milktech.application.use_cases.vaccines import upcoming_vaccines
from milktech.application.use_cases.vaccines.upcoming_vaccines import UpcomingVaccine
from milktech.domain.services.ledger import ProductionTotals, sum_days
from milktech.domain.services.pricing import DairyPriceSummary
from milktech.utils.dates import format_date, month_bounds, today


@dataclass(slots=True)
class SparklinePoint:
    label: str
    total: Decimal


@dataclass(slots=True)
class ProducerSummary:
    top_dairies: list[DairyPriceSummary] = field(default_factory=list)
    upcoming_vaccines: list[UpcomingVaccine] = field(default_factory=list)
    total_animals: int = 0
    total_recipes: int = 0
    month: ProductionTotals = field(default_factory=ProductionTotals)
    sparkline: list[SparklinePoint] = field(default_factory=list)


async def execute(
    uow: UnitOfWork, owner_id: str, *, reference: date | None = None
) -> ProducerSummary:
    """Home screen figures for a producer, for the month containing `reference`."""
    reference = reference or today()
    first, last = month_bounds(reference.year, reference.month)
    days = await aggregate_by_day.execute(uow, owner_id, date_from=first, date_to=last)
    totals = sum_days(days)
    # gross revenue is shown with cents
    totals.gross_revenue = totals.gross_revenue.quantize(Decimal("0.01"))
    return ProducerSummary(
        top_dairies=await rank_dairies.execute(uow),
        upcoming_vaccines=await upcoming_vaccines.execute(uow, owner_id, reference=reference),
        total_animals=len(await uow.animals.list(owner_id)),
        total_recipes=len(await uow.feed_recipes.list(owner_id)),
        month=totals,
        sparkline=[
            SparklinePoint(label=format_date(d.date, "dd/mm"), total=d.total_liters) for d in days
        ],
    )
