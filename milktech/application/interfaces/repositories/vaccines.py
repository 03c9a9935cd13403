from __future__ import annotations

from typing import Protocol

from milktech.domain.models.vaccine import Vaccine


class VaccinesRepository(Protocol):
    async def add(self, item: Vaccine) -> Vaccine: ...
    async def get(self, item_id: str) -> Vaccine | None: ...
    async def all(self) -> list[Vaccine]: ...
    async def list_by_animal(self, animal_id: str) -> list[Vaccine]: ...
    async def put(self, item: Vaccine) -> Vaccine | None: ...
    async def delete(self, item_id: str) -> bool: ...
    async def delete_by_animal(self, animal_id: str) -> int: ...
