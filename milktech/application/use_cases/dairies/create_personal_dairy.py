from __future__ import annotations

import logging
from dataclasses import dataclass

from milktech.application.errors import ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import clean_text
from milktech.domain.models.personal_dairy import PersonalDairy

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PersonalDairyInput:
    name: str | None = None
    cnpj: str | None = None
    phone: str | None = None
    contact_name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None


async def execute(uow: UnitOfWork, owner_id: str, payload: PersonalDairyInput) -> PersonalDairy:
    name = clean_text(payload.name)
    if not name:
        raise ValidationError("Dairy name is required")
    dairy = PersonalDairy.create(
        owner_id=owner_id,
        name=name,
        cnpj=clean_text(payload.cnpj),
        phone=clean_text(payload.phone),
        contact_name=clean_text(payload.contact_name),
        address=clean_text(payload.address),
        city=clean_text(payload.city),
        state=clean_text(payload.state),
    )
    created = await uow.personal_dairies.add(dairy)
    await uow.commit()
    logger.info("Created personal dairy %s for owner %s", created.id, owner_id)
    return created
