from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from milktech.domain.value_objects.proportion_type import ProportionType


@dataclass(slots=True)
class FeedRecipe:
    id: str
    owner_id: str
    name: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, owner_id: str, name: str) -> FeedRecipe:
        now = datetime.now(timezone.utc)
        return cls(id=str(uuid4()), owner_id=owner_id, name=name, created_at=now, updated_at=now)


@dataclass(slots=True)
class FeedRecipeItem:
    id: str
    recipe_id: str
    ingredient_name: str
    proportion_type: ProportionType = ProportionType.PERCENT
    proportion_value: Decimal = Decimal("0")
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        recipe_id: str,
        ingredient_name: str,
        proportion_type: ProportionType = ProportionType.PERCENT,
        proportion_value: Decimal = Decimal("0"),
    ) -> FeedRecipeItem:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            recipe_id=recipe_id,
            ingredient_name=ingredient_name,
            proportion_type=proportion_type,
            proportion_value=proportion_value,
            created_at=now,
            updated_at=now,
        )
