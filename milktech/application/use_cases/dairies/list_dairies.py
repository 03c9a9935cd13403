from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.dairy import Dairy


async def execute(uow: UnitOfWork) -> list[Dairy]:
    dairies = await uow.dairies.all()
    return sorted(dairies, key=lambda d: d.trade_name.lower())
