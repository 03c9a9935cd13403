from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass(slots=True)
class PersonalDairy:
    """Dairy a producer sells to that is not in the official directory."""

    id: str
    owner_id: str
    name: str
    cnpj: str = ""
    phone: str = ""
    contact_name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        owner_id: str,
        name: str,
        cnpj: str = "",
        phone: str = "",
        contact_name: str = "",
        address: str = "",
        city: str = "",
        state: str = "",
    ) -> PersonalDairy:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            owner_id=owner_id,
            name=name,
            cnpj=cnpj,
            phone=phone,
            contact_name=contact_name,
            address=address,
            city=city,
            state=state.upper(),
            created_at=now,
            updated_at=now,
        )
