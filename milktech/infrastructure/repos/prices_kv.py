from __future__ import annotations

from milktech.application.interfaces.key_value_store import KeyValueStore
from milktech.application.interfaces.repositories.prices import (
    OfficialPricesRepository,
    PriceHistoryRepository,
)
from milktech.domain.models.price_record import PriceRecord
from milktech.domain.services.pricing import sort_history
from milktech.infrastructure.documents.prices import PriceRecordDocument
from milktech.infrastructure.repos.documents import DocumentRepository
from milktech.infrastructure.storage.keys import DocumentKeys


class OfficialPricesKVRepository(DocumentRepository[PriceRecord], OfficialPricesRepository):
    """Prices of every official dairy, kept together in one document."""

    schema = PriceRecordDocument
    model = PriceRecord

    async def list_for_dairy(self, dairy_id: str) -> list[PriceRecord]:
        return sort_history(await self._filter(lambda r: r.dairy_id == dairy_id))

    async def save_for_dairy(self, dairy_id: str, records: list[PriceRecord]) -> None:
        others = await self._filter(lambda r: r.dairy_id != dairy_id)
        await self._save(others + list(records))

    async def delete_for_dairy(self, dairy_id: str) -> None:
        await self._delete_where(lambda r: r.dairy_id == dairy_id)


class PersonalPricesKVRepository(DocumentRepository[PriceRecord], PriceHistoryRepository):
    """One price document per personal dairy."""

    schema = PriceRecordDocument
    model = PriceRecord

    def __init__(self, store: KeyValueStore, keys: DocumentKeys) -> None:
        super().__init__(store, keys.personal_dairies)
        self.keys = keys

    async def list_for_dairy(self, dairy_id: str) -> list[PriceRecord]:
        return sort_history(await self._load(self.keys.personal_dairy_prices(dairy_id)))

    async def save_for_dairy(self, dairy_id: str, records: list[PriceRecord]) -> None:
        await self._save(sort_history(records), self.keys.personal_dairy_prices(dairy_id))

    async def delete_for_dairy(self, dairy_id: str) -> None:
        await self.store.remove(self.keys.personal_dairy_prices(dairy_id))
