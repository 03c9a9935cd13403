from __future__ import annotations

from typing import Protocol

from milktech.domain.models.movement import Movement


class MovementsRepository(Protocol):
    async def add(self, item: Movement) -> Movement: ...
    async def get(self, item_id: str) -> Movement | None: ...
    async def all(self) -> list[Movement]: ...
    async def list_by_animal(self, animal_id: str) -> list[Movement]: ...
    async def put(self, item: Movement) -> Movement | None: ...
    async def delete(self, item_id: str) -> bool: ...
    async def delete_by_animal(self, animal_id: str) -> int: ...
