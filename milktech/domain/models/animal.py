from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import uuid4

from milktech.domain.value_objects.animal_status import AnimalStatus
from milktech.domain.value_objects.animal_type import AnimalType
from milktech.utils.dates import age_in_months


@dataclass(slots=True)
class Animal:
    id: str
    owner_id: str
    name: str
    earring: str
    type: AnimalType = AnimalType.COW
    breed: str = ""
    status: AnimalStatus = AnimalStatus.ACTIVE
    stage: str = ""
    birth_date: date | None = None
    dam_id: str | None = None
    sire_id: str | None = None
    notes: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        owner_id: str,
        name: str,
        earring: str,
        type: AnimalType = AnimalType.COW,
        breed: str = "",
        status: AnimalStatus = AnimalStatus.ACTIVE,
        stage: str = "",
        birth_date: date | None = None,
        dam_id: str | None = None,
        sire_id: str | None = None,
        notes: str = "",
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            owner_id=owner_id,
            name=name,
            earring=earring,
            type=type,
            breed=breed,
            status=status,
            stage=stage,
            birth_date=birth_date,
            dam_id=dam_id,
            sire_id=sire_id,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    @property
    def earring_key(self) -> str:
        return self.earring.strip().lower()

    def age_in_months(self, *, reference: date | None = None) -> int | None:
        if self.birth_date is None:
            return None
        return age_in_months(self.birth_date, reference=reference)

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
