from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass(slots=True)
class Dairy:
    """Official dairy (buyer) published in the shared directory."""

    id: str
    trade_name: str
    user_id: str | None = None
    cnpj: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    lat: float | None = None
    lng: float | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        trade_name: str,
        user_id: str | None = None,
        cnpj: str = "",
        phone: str = "",
        address: str = "",
        city: str = "",
        state: str = "",
        lat: float | None = None,
        lng: float | None = None,
    ) -> Dairy:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            trade_name=trade_name,
            user_id=user_id,
            cnpj=cnpj,
            phone=phone,
            address=address,
            city=city,
            state=state.upper(),
            lat=lat,
            lng=lng,
            created_at=now,
            updated_at=now,
        )
