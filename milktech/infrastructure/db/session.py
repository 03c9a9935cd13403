from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from milktech.infrastructure.db.base import Base
from milktech.infrastructure.db.orm import kv_entry  # noqa: F401
from milktech.infrastructure.storage.keys import DocumentKeys
from milktech.infrastructure.storage.sqlalchemy_store import SQLAlchemyKeyValueStore
from milktech.infrastructure.unit_of_work import KeyValueUnitOfWork


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


class SQLAlchemyUnitOfWork(KeyValueUnitOfWork):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        keys: DocumentKeys | None = None,
    ) -> None:
        super().__init__(lambda: SQLAlchemyKeyValueStore(session_factory()), keys)
