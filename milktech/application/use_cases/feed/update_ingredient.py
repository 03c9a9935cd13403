from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.feed._ingredients import (
    parse_proportion_type,
    proportion_value,
)
from milktech.application.use_cases.feed.add_ingredient import IngredientInput
from milktech.domain.models.feed_recipe import FeedRecipeItem
from milktech.utils.dates import now_utc


async def execute(
    uow: UnitOfWork, item_id: str, payload: IngredientInput
) -> FeedRecipeItem | None:
    item = await uow.feed_recipe_items.get(item_id)
    if item is None:
        return None
    if payload.ingredient_name is not None and payload.ingredient_name.strip():
        item.ingredient_name = payload.ingredient_name.strip()
    if payload.proportion_type:
        item.proportion_type = parse_proportion_type(payload.proportion_type)
    if payload.proportion_value is not None:
        item.proportion_value = proportion_value(item.proportion_type, payload.proportion_value)
    else:
        # a type change may leave the stored value out of range
        item.proportion_value = proportion_value(item.proportion_type, item.proportion_value)
    item.updated_at = now_utc()
    updated = await uow.feed_recipe_items.put(item)
    await uow.commit()
    return updated
