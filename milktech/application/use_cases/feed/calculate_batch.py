from __future__ import annotations

from typing import Any

from milktech.application.errors import NotFound, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import to_decimal
from milktech.domain.services.feed import BatchCalculation, calculate_batch


async def execute(
    uow: UnitOfWork,
    recipe_id: str,
    target_kg: Any,
    daily_consumption: Any = None,
) -> BatchCalculation:
    target = to_decimal(target_kg)
    if target is None or target <= 0:
        raise ValidationError(
            "Target quantity must be greater than zero", details={"target_kg": target_kg}
        )
    recipe = await uow.feed_recipes.get(recipe_id)
    if recipe is None:
        raise NotFound(f"Recipe {recipe_id} not found")
    items = await uow.feed_recipe_items.list_by_recipe(recipe.id)
    return calculate_batch(recipe, items, target, to_decimal(daily_consumption))
