from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.personal_dairy import PersonalDairy


async def execute(uow: UnitOfWork, owner_id: str) -> list[PersonalDairy]:
    return await uow.personal_dairies.list(owner_id)
