from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from milktech.application.errors import ConflictError, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import clean_text
from milktech.domain.models.user import SessionUser, User
from milktech.domain.value_objects.user_role import UserRole
from milktech.infrastructure.auth.password import PasswordHasher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RegisterUserInput:
    email: str
    password: str
    name: str | None = None
    phone: str | None = None
    city: str | None = None
    state: str | None = None
    role: Any = UserRole.PRODUCER


def parse_role(value: Any) -> UserRole:
    if isinstance(value, UserRole):
        return value
    try:
        return UserRole(str(value or UserRole.PRODUCER.value).strip().lower())
    except ValueError:
        raise ValidationError(
            "Role must be 'producer' or 'dairy'", details={"role": value}
        ) from None


async def execute(
    *,
    uow: UnitOfWork,
    payload: RegisterUserInput,
    password_hasher: PasswordHasher,
) -> SessionUser:
    """Create an account and sign it in."""
    email = clean_text(payload.email).lower()
    password = clean_text(payload.password)
    if not email or not password:
        raise ValidationError("Email and password are required")
    role = parse_role(payload.role)
    if await uow.users.get_by_email(email):
        raise ConflictError("Email already registered")

    user = User.create(
        email=email,
        hashed_password=password_hasher.hash(password),
        name=clean_text(payload.name),
        phone=clean_text(payload.phone),
        city=clean_text(payload.city),
        state=clean_text(payload.state),
        role=role,
    )
    created = await uow.users.add(user)
    session_user = created.to_session()
    await uow.session.set(session_user)
    await uow.commit()
    logger.info("Registered %s user %s", role.value, created.id)
    return session_user
