from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from milktech.application.interfaces.key_value_store import TransactionalKeyValueStore
from milktech.infrastructure.db.orm.kv_entry import KeyValueEntryORM
from milktech.infrastructure.storage.codec import decode, encode


class SQLAlchemyKeyValueStore(TransactionalKeyValueStore):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, key: str, default: Any = None) -> Any:
        result = await self.session.execute(
            select(KeyValueEntryORM.value).where(KeyValueEntryORM.key == key)
        )
        return decode(key, result.scalar_one_or_none(), default)

    async def set(self, key: str, value: Any) -> None:
        now = datetime.now(timezone.utc)
        orm = await self.session.get(KeyValueEntryORM, key)
        if orm is None:
            self.session.add(
                KeyValueEntryORM(key=key, value=encode(value), created_at=now, updated_at=now)
            )
        else:
            orm.value = encode(value)
            orm.updated_at = now
        await self.session.flush()

    async def remove(self, key: str) -> None:
        await self.session.execute(delete(KeyValueEntryORM).where(KeyValueEntryORM.key == key))

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def close(self) -> None:
        await self.session.close()
