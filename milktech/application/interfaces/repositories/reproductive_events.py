from __future__ import annotations

from typing import Protocol

from milktech.domain.models.reproductive_event import ReproductiveEvent


class ReproductiveEventsRepository(Protocol):
    async def add(self, item: ReproductiveEvent) -> ReproductiveEvent: ...
    async def get(self, item_id: str) -> ReproductiveEvent | None: ...
    async def all(self) -> list[ReproductiveEvent]: ...
    async def list_by_animal(self, animal_id: str) -> list[ReproductiveEvent]: ...
    async def put(self, item: ReproductiveEvent) -> ReproductiveEvent | None: ...
    async def delete(self, item_id: str) -> bool: ...
    async def delete_by_animal(self, animal_id: str) -> int: ...
