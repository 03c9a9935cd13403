from __future__ import annotations

import logging

import pydantic

from milktech.application.interfaces.key_value_store import KeyValueStore
from milktech.application.interfaces.repositories.users import SessionRepository, UsersRepository
from milktech.domain.models.user import SessionUser, User
from milktech.infrastructure.documents.users import SessionUserDocument, UserDocument
from milktech.infrastructure.repos.documents import DocumentRepository

logger = logging.getLogger(__name__)


class UsersKVRepository(DocumentRepository[User], UsersRepository):
    schema = UserDocument
    model = User

    async def get_by_email(self, email: str) -> User | None:
        wanted = email.strip().lower()
        return next((u for u in await self._load() if u.email == wanted), None)


class SessionKVRepository(SessionRepository):
    """The signed-in user, stored as a single object."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        self.store = store
        self.key = key

    async def get(self) -> SessionUser | None:
        raw = await self.store.get(self.key)
        if raw is None:
            return None
        try:
            doc = SessionUserDocument.model_validate(raw)
        except pydantic.ValidationError:
            logger.warning("Discarding unreadable session document %s", self.key)
            return None
        return SessionUser(**dict(doc))

    async def set(self, user: SessionUser) -> None:
        doc = SessionUserDocument.model_validate(user)
        await self.store.set(self.key, doc.model_dump(mode="json"))

    async def clear(self) -> None:
        await self.store.remove(self.key)
