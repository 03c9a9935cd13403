from __future__ import annotations

from milktech.application.errors import ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import clean_text
from milktech.domain.models.feed_recipe import FeedRecipe
from milktech.utils.dates import now_utc


async def execute(uow: UnitOfWork, recipe_id: str, name: str) -> FeedRecipe | None:
    name = clean_text(name)
    if not name:
        raise ValidationError("Recipe name is required")
    recipe = await uow.feed_recipes.get(recipe_id)
    if recipe is None:
        return None
    recipe.name = name
    recipe.updated_at = now_utc()
    updated = await uow.feed_recipes.put(recipe)
    await uow.commit()
    return updated
