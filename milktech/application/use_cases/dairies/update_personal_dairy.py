from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.dairies.create_personal_dairy import PersonalDairyInput
from milktech.domain.coercion import clean_text
from milktech.domain.models.personal_dairy import PersonalDairy
from milktech.utils.dates import now_utc


async def execute(
    uow: UnitOfWork, dairy_id: str, payload: PersonalDairyInput
) -> PersonalDairy | None:
    dairy = await uow.personal_dairies.get(dairy_id)
    if dairy is None:
        return None
    if payload.name is not None and payload.name.strip():
        dairy.name = payload.name.strip()
    for field_name in ("cnpj", "phone", "contact_name", "address", "city"):
        value = getattr(payload, field_name)
        if value is not None:
            setattr(dairy, field_name, clean_text(value))
    if payload.state is not None:
        dairy.state = clean_text(payload.state).upper()
    dairy.updated_at = now_utc()
    updated = await uow.personal_dairies.put(dairy)
    await uow.commit()
    return updated
