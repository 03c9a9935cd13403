from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from milktech.application.errors import NotFound, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.feed._ingredients import (
    parse_proportion_type,
    proportion_value,
)
from milktech.domain.coercion import clean_text
from milktech.domain.models.feed_recipe import FeedRecipeItem


@dataclass(slots=True)
class IngredientInput:
    ingredient_name: str | None = None
    proportion_type: Any = None
    proportion_value: Any = None


async def execute(uow: UnitOfWork, recipe_id: str, payload: IngredientInput) -> FeedRecipeItem:
    name = clean_text(payload.ingredient_name)
    if not name:
        raise ValidationError("Ingredient name is required")
    proportion_type = parse_proportion_type(payload.proportion_type)
    if await uow.feed_recipes.get(recipe_id) is None:
        raise NotFound(f"Recipe {recipe_id} not found")
    item = FeedRecipeItem.create(
        recipe_id=recipe_id,
        ingredient_name=name,
        proportion_type=proportion_type,
        proportion_value=proportion_value(proportion_type, payload.proportion_value),
    )
    created = await uow.feed_recipe_items.add(item)
    await uow.commit()
    return created
