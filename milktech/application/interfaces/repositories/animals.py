from __future__ import annotations

from typing import Protocol

from milktech.domain.models.animal import Animal


class AnimalsRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...
    async def get(self, animal_id: str) -> Animal | None: ...
    async def list(self, owner_id: str) -> list[Animal]: ...
    async def put(self, animal: Animal) -> Animal | None: ...
    async def delete(self, animal_id: str) -> bool: ...
    async def find_by_earring(
        self, owner_id: str, earring: str, *, exclude_id: str | None = None
    ) -> Animal | None: ...
