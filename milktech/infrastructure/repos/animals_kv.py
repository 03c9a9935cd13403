from __future__ import annotations

from milktech.application.interfaces.repositories.animals import AnimalsRepository
from milktech.domain.models.animal import Animal
from milktech.infrastructure.documents.animals import AnimalDocument
from milktech.infrastructure.repos.documents import DocumentRepository


class AnimalsKVRepository(DocumentRepository[Animal], AnimalsRepository):
    schema = AnimalDocument
    model = Animal

    async def list(self, owner_id: str) -> list[Animal]:
        animals = await self._filter(lambda a: a.owner_id == owner_id)
        return sorted(animals, key=lambda a: a.name.lower())

    async def find_by_earring(
        self, owner_id: str, earring: str, *, exclude_id: str | None = None
    ) -> Animal | None:
        wanted = earring.strip().lower()
        for animal in await self._load():
            if animal.owner_id != owner_id or animal.id == exclude_id:
                continue
            if animal.earring_key == wanted:
                return animal
        return None
