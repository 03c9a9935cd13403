from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.dairies._permissions import ensure_can_manage_dairy
from milktech.application.use_cases.tanks.create_tank import TankInput
from milktech.domain.coercion import clean_text
from milktech.domain.models.tank import Tank
from milktech.domain.value_objects.user_role import UserRole
from milktech.utils.dates import now_utc


async def execute(
    uow: UnitOfWork, role: UserRole, tank_id: str, payload: TankInput
) -> Tank | None:
    ensure_can_manage_dairy(role)
    tank = await uow.tanks.get(tank_id)
    if tank is None:
        return None
    if payload.name is not None and payload.name.strip():
        tank.name = payload.name.strip()
    for field_name in ("address", "city", "responsible_name", "responsible_phone"):
        value = getattr(payload, field_name)
        if value is not None:
            setattr(tank, field_name, clean_text(value))
    if payload.state is not None:
        tank.state = clean_text(payload.state).upper()
    if payload.lat is not None:
        tank.lat = payload.lat
    if payload.lng is not None:
        tank.lng = payload.lng
    tank.updated_at = now_utc()
    updated = await uow.tanks.put(tank)
    await uow.commit()
    return updated
