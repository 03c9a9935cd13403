from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, ClassVar, Generic, TypeVar

import pydantic

from milktech.application.interfaces.key_value_store import KeyValueStore
from milktech.infrastructure.documents.base import Document

logger = logging.getLogger(__name__)

DomainT = TypeVar("DomainT")


class DocumentRepository(Generic[DomainT]):
    """Repository over a JSON array of records kept under a single key.

    Records that fail validation are logged and left out of the result, so
    one bad entry never makes the whole collection unreadable.
    """

    schema: ClassVar[type[Document]]
    model: ClassVar[type]

    def __init__(self, store: KeyValueStore, key: str) -> None:
        self.store = store
        self.key = key

    def _to_domain(self, doc: Document) -> DomainT:
        return self.model(**dict(doc))

    def _to_document(self, item: DomainT) -> dict[str, Any]:
        return self.schema.model_validate(item).model_dump(mode="json")

    async def _load(self, key: str | None = None) -> list[DomainT]:
        key = key or self.key
        raw = await self.store.get(key, [])
        if not isinstance(raw, list):
            logger.warning("Document %s is not a list; treating it as empty", key)
            return []
        items: list[DomainT] = []
        for record in raw:
            try:
                doc = self.schema.model_validate(record)
            except pydantic.ValidationError as exc:
                logger.warning(
                    "Skipping unreadable record in %s (%d errors)", key, exc.error_count()
                )
                continue
            items.append(self._to_domain(doc))
        return items

    async def _save(self, items: list[DomainT], key: str | None = None) -> None:
        await self.store.set(key or self.key, [self._to_document(item) for item in items])

    async def _filter(self, predicate: Callable[[DomainT], bool]) -> list[DomainT]:
        return [item for item in await self._load() if predicate(item)]

    async def all(self) -> list[DomainT]:
        return await self._load()

    async def replace_all(self, items: list[DomainT]) -> None:
        await self._save(list(items))

    async def get(self, item_id: str) -> DomainT | None:
        return next((item for item in await self._load() if item.id == item_id), None)

    async def add(self, item: DomainT) -> DomainT:
        items = await self._load()
        items.append(item)
        await self._save(items)
        return item

    async def put(self, item: DomainT) -> DomainT | None:
        items = await self._load()
        for idx, current in enumerate(items):
            if current.id == item.id:
                items[idx] = item
                await self._save(items)
                return item
        return None

    async def delete(self, item_id: str) -> bool:
        return await self._delete_where(lambda item: item.id == item_id) > 0

    async def _delete_where(self, predicate: Callable[[DomainT], bool]) -> int:
        items = await self._load()
        kept = [item for item in items if not predicate(item)]
        removed = len(items) - len(kept)
        if removed:
            await self._save(kept)
        return removed
