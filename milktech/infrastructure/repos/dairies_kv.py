from __future__ import annotations

from milktech.application.interfaces.repositories.dairies import (
    DairiesRepository,
    PersonalDairiesRepository,
)
from milktech.application.interfaces.repositories.tanks import TanksRepository
from milktech.domain.models.dairy import Dairy
from milktech.domain.models.personal_dairy import PersonalDairy
from milktech.domain.models.tank import Tank
from milktech.infrastructure.documents.dairies import (
    DairyDocument,
    PersonalDairyDocument,
    TankDocument,
)
from milktech.infrastructure.repos.documents import DocumentRepository


class DairiesKVRepository(DocumentRepository[Dairy], DairiesRepository):
    schema = DairyDocument
    model = Dairy

    async def get_by_user(self, user_id: str) -> Dairy | None:
        matches = await self._filter(lambda d: d.user_id == user_id)
        return matches[0] if matches else None


class PersonalDairiesKVRepository(DocumentRepository[PersonalDairy], PersonalDairiesRepository):
    schema = PersonalDairyDocument
    model = PersonalDairy

    async def list(self, owner_id: str) -> list[PersonalDairy]:
        dairies = await self._filter(lambda d: d.owner_id == owner_id)
        return sorted(dairies, key=lambda d: d.name.lower())


class TanksKVRepository(DocumentRepository[Tank], TanksRepository):
    schema = TankDocument
    model = Tank

    async def list_by_dairy(self, dairy_id: str) -> list[Tank]:
        return await self._filter(lambda t: t.dairy_id == dairy_id)
