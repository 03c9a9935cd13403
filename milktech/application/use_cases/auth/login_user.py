from __future__ import annotations

import logging
from dataclasses import dataclass

from milktech.application.errors import AuthError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.user import SessionUser
from milktech.infrastructure.auth.password import PasswordHasher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoginInput:
    email: str
    password: str


async def execute(
    *,
    uow: UnitOfWork,
    payload: LoginInput,
    password_hasher: PasswordHasher,
) -> SessionUser:
    email = (payload.email or "").strip().lower()
    password = (payload.password or "").strip()
    if not email or not password:
        raise AuthError("Email and password are required")
    user = await uow.users.get_by_email(email)
    if not user or not password_hasher.verify(password, user.hashed_password):
        raise AuthError("Invalid credentials")

    session_user = user.to_session()
    await uow.session.set(session_user)
    await uow.commit()
    logger.info("User %s signed in", user.id)
    return session_user
