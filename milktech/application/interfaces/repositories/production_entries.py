from __future__ import annotations

from datetime import date
from typing import Protocol

from milktech.domain.models.production_entry import ProductionEntry


class ProductionEntriesRepository(Protocol):
    async def all(self) -> list[ProductionEntry]: ...
    async def replace_all(self, entries: list[ProductionEntry]) -> None: ...
    async def get(self, entry_id: str) -> ProductionEntry | None: ...
    async def list(
        self,
        owner_id: str,
        *,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[ProductionEntry]: ...
    async def delete(self, entry_id: str) -> bool: ...
