from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.dairy import Dairy


async def execute(uow: UnitOfWork, dairy_id: str) -> Dairy | None:
    return await uow.dairies.get(dairy_id)


async def get_by_user(uow: UnitOfWork, user_id: str) -> Dairy | None:
    """Dairy managed by a dairy-role user."""
    return await uow.dairies.get_by_user(user_id)
