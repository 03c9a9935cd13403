from __future__ import annotations

from typing import TypeVar

from milktech.application.interfaces.repositories.movements import MovementsRepository
from milktech.application.interfaces.repositories.reproductive_events import (
    ReproductiveEventsRepository,
)
from milktech.application.interfaces.repositories.vaccines import VaccinesRepository
from milktech.domain.models.movement import Movement
from milktech.domain.models.reproductive_event import ReproductiveEvent
from milktech.domain.models.vaccine import Vaccine
from milktech.infrastructure.documents.animals import (
    MovementDocument,
    ReproductiveEventDocument,
    VaccineDocument,
)
from milktech.infrastructure.repos.documents import DocumentRepository

RecordT = TypeVar("RecordT", Vaccine, Movement, ReproductiveEvent)


class AnimalRecordsKVRepository(DocumentRepository[RecordT]):
    """Records that belong to a single animal."""

    async def list_by_animal(self, animal_id: str) -> list[RecordT]:
        return await self._filter(lambda r: r.animal_id == animal_id)

    async def delete_by_animal(self, animal_id: str) -> int:
        return await self._delete_where(lambda r: r.animal_id == animal_id)


class VaccinesKVRepository(AnimalRecordsKVRepository[Vaccine], VaccinesRepository):
    schema = VaccineDocument
    model = Vaccine


class MovementsKVRepository(AnimalRecordsKVRepository[Movement], MovementsRepository):
    schema = MovementDocument
    model = Movement


class ReproductiveEventsKVRepository(
    AnimalRecordsKVRepository[ReproductiveEvent], ReproductiveEventsRepository
):
    schema = ReproductiveEventDocument
    model = ReproductiveEvent
