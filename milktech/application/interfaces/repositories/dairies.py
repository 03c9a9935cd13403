from __future__ import annotations

from typing import Protocol

from milktech.domain.models.dairy import Dairy
from milktech.domain.models.personal_dairy import PersonalDairy


class DairiesRepository(Protocol):
    async def add(self, dairy: Dairy) -> Dairy: ...
    async def get(self, dairy_id: str) -> Dairy | None: ...
    async def all(self) -> list[Dairy]: ...
    async def get_by_user(self, user_id: str) -> Dairy | None: ...
    async def put(self, dairy: Dairy) -> Dairy | None: ...
    async def replace_all(self, dairies: list[Dairy]) -> None: ...


class PersonalDairiesRepository(Protocol):
    async def add(self, dairy: PersonalDairy) -> PersonalDairy: ...
    async def get(self, dairy_id: str) -> PersonalDairy | None: ...
    async def list(self, owner_id: str) -> list[PersonalDairy]: ...
    async def put(self, dairy: PersonalDairy) -> PersonalDairy | None: ...
    async def delete(self, dairy_id: str) -> bool: ...
