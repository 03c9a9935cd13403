from __future__ import annotations

from dataclasses import dataclass

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.dairies._permissions import ensure_can_manage_dairy
from milktech.domain.coercion import clean_text
from milktech.domain.models.dairy import Dairy
from milktech.domain.value_objects.user_role import UserRole
from milktech.utils.dates import now_utc


@dataclass(slots=True)
class UpdateDairyInput:
    trade_name: str | None = None
    cnpj: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    lat: float | None = None
    lng: float | None = None


async def execute(
    uow: UnitOfWork, role: UserRole, dairy_id: str, payload: UpdateDairyInput
) -> Dairy | None:
    ensure_can_manage_dairy(role)
    dairy = await uow.dairies.get(dairy_id)
    if dairy is None:
        return None
    if payload.trade_name is not None and payload.trade_name.strip():
        dairy.trade_name = payload.trade_name.strip()
    for field_name in ("cnpj", "phone", "address", "city"):
        value = getattr(payload, field_name)
        if value is not None:
            setattr(dairy, field_name, clean_text(value))
    if payload.state is not None:
        dairy.state = clean_text(payload.state).upper()
    if payload.lat is not None:
        dairy.lat = payload.lat
    if payload.lng is not None:
        dairy.lng = payload.lng
    dairy.updated_at = now_utc()
    updated = await uow.dairies.put(dairy)
    await uow.commit()
    return updated
