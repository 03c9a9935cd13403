from __future__ import annotations

import logging
from dataclasses import dataclass

from milktech.application.errors import ConflictError, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.dairies._permissions import ensure_can_manage_dairy
from milktech.domain.coercion import clean_text
from milktech.domain.models.dairy import Dairy
from milktech.domain.value_objects.user_role import UserRole

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateDairyInput:
    trade_name: str
    cnpj: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    lat: float | None = None
    lng: float | None = None


async def execute(
    uow: UnitOfWork, user_id: str, role: UserRole, payload: CreateDairyInput
) -> Dairy:
    ensure_can_manage_dairy(role)
    trade_name = clean_text(payload.trade_name)
    if not trade_name:
        raise ValidationError("Trade name is required")
    if await uow.dairies.get_by_user(user_id) is not None:
        raise ConflictError("User already manages a dairy")
    dairy = Dairy.create(
        trade_name=trade_name,
        user_id=user_id,
        cnpj=clean_text(payload.cnpj),
        phone=clean_text(payload.phone),
        address=clean_text(payload.address),
        city=clean_text(payload.city),
        state=clean_text(payload.state),
        lat=payload.lat,
        lng=payload.lng,
    )
    created = await uow.dairies.add(dairy)
    await uow.commit()
    logger.info("Created dairy %s for user %s", created.id, user_id)
    return created
