from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from milktech.domain.value_objects.user_role import UserRole


@dataclass(slots=True)
class User:
    id: str
    email: str
    hashed_password: str
    name: str = ""
    phone: str = ""
    city: str = ""
    state: str = ""
    role: UserRole = UserRole.PRODUCER
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        email: str,
        hashed_password: str,
        *,
        name: str = "",
        phone: str = "",
        city: str = "",
        state: str = "",
        role: UserRole = UserRole.PRODUCER,
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            email=email.strip().lower(),
            hashed_password=hashed_password,
            name=name,
            phone=phone,
            city=city,
            state=state.upper(),
            role=role,
            created_at=now,
            updated_at=now,
        )

    def to_session(self) -> SessionUser:
        return SessionUser(
            id=self.id,
            email=self.email,
            name=self.name,
            phone=self.phone,
            city=self.city,
            state=self.state,
            role=self.role,
            created_at=self.created_at,
        )


@dataclass(slots=True)
class SessionUser:
    """Signed-in user as kept in the session document (no password hash)."""

    id: str
    email: str
    name: str = ""
    phone: str = ""
    city: str = ""
    state: str = ""
    role: UserRole = UserRole.PRODUCER
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
