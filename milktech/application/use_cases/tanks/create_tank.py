from __future__ import annotations

import logging
from dataclasses import dataclass

from milktech.application.errors import NotFound, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.dairies._permissions import ensure_can_manage_dairy
from milktech.domain.coercion import clean_text
from milktech.domain.models.tank import Tank
from milktech.domain.value_objects.user_role import UserRole

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TankInput:
    name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    lat: float | None = None
    lng: float | None = None
    responsible_name: str | None = None
    responsible_phone: str | None = None


async def execute(uow: UnitOfWork, role: UserRole, dairy_id: str, payload: TankInput) -> Tank:
    ensure_can_manage_dairy(role)
    name = clean_text(payload.name)
    if not name:
        raise ValidationError("Tank name is required")
    if await uow.dairies.get(dairy_id) is None:
        raise NotFound(f"Dairy {dairy_id} not found")
    tank = Tank.create(
        dairy_id=dairy_id,
        name=name,
        address=clean_text(payload.address),
        city=clean_text(payload.city),
        state=clean_text(payload.state),
        lat=payload.lat,
        lng=payload.lng,
        responsible_name=clean_text(payload.responsible_name),
        responsible_phone=clean_text(payload.responsible_phone),
    )
    created = await uow.tanks.add(tank)
    await uow.commit()
    logger.info("Created tank %s for dairy %s", created.id, dairy_id)
    return created
