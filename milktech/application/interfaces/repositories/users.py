from __future__ import annotations

from typing import Protocol

from milktech.domain.models.user import SessionUser, User


class UsersRepository(Protocol):
    async def add(self, user: User) -> User: ...
    async def get_by_email(self, email: str) -> User | None: ...


class SessionRepository(Protocol):
    async def get(self) -> SessionUser | None: ...
    async def set(self, user: SessionUser) -> None: ...
    async def clear(self) -> None: ...
