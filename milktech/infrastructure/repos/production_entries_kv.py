from __future__ import annotations

from datetime import date

from milktech.application.interfaces.repositories.production_entries import (
    ProductionEntriesRepository,
)
from milktech.domain.models.production_entry import ProductionEntry
from milktech.domain.services.ledger import filter_range, sort_entries
from milktech.infrastructure.documents.production import ProductionEntryDocument
from milktech.infrastructure.repos.documents import DocumentRepository


class ProductionEntriesKVRepository(
    DocumentRepository[ProductionEntry], ProductionEntriesRepository
):
    schema = ProductionEntryDocument
    model = ProductionEntry

    async def list(
        self,
        owner_id: str,
        *,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[ProductionEntry]:
        entries = filter_range(
            await self._load(), owner_id, date_from=date_from, date_to=date_to
        )
        return sort_entries(entries)
