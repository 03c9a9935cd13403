from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.dairies._permissions import ensure_can_manage_dairy
from milktech.domain.value_objects.user_role import UserRole


async def execute(uow: UnitOfWork, role: UserRole, tank_id: str) -> bool:
    ensure_can_manage_dairy(role)
    deleted = await uow.tanks.delete(tank_id)
    if deleted:
        await uow.commit()
    return deleted
