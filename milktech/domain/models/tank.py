from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass(slots=True)
class Tank:
    id: str
    dairy_id: str
    name: str
    address: str = ""
    city: str = ""
    state: str = ""
    lat: float | None = None
    lng: float | None = None
    responsible_name: str = ""
    responsible_phone: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        dairy_id: str,
        name: str,
        address: str = "",
        city: str = "",
        state: str = "",
        lat: float | None = None,
        lng: float | None = None,
        responsible_name: str = "",
        responsible_phone: str = "",
    ) -> Tank:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            dairy_id=dairy_id,
            name=name,
            address=address,
            city=city,
            state=state.upper(),
            lat=lat,
            lng=lng,
            responsible_name=responsible_name,
            responsible_phone=responsible_phone,
            created_at=now,
            updated_at=now,
        )

    def matches_location(self, term: str) -> bool:
        needle = term.strip().lower()
        return needle in self.city.lower() or needle in self.state.lower()
