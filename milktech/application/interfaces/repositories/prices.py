from __future__ import annotations

from typing import Protocol

from milktech.domain.models.price_record import PriceRecord


class PriceHistoryRepository(Protocol):
    async def list_for_dairy(self, dairy_id: str) -> list[PriceRecord]: ...
    async def save_for_dairy(self, dairy_id: str, records: list[PriceRecord]) -> None: ...
    async def delete_for_dairy(self, dairy_id: str) -> None: ...


class OfficialPricesRepository(PriceHistoryRepository, Protocol):
    async def add(self, record: PriceRecord) -> PriceRecord: ...
    async def all(self) -> list[PriceRecord]: ...
    async def replace_all(self, records: list[PriceRecord]) -> None: ...
