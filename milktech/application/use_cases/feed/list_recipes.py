from __future__ import annotations

from dataclasses import dataclass, field

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.feed_recipe import FeedRecipe, FeedRecipeItem


@dataclass(slots=True)
class RecipeWithItems:
    recipe: FeedRecipe
    items: list[FeedRecipeItem] = field(default_factory=list)


async def execute(uow: UnitOfWork, owner_id: str) -> list[RecipeWithItems]:
    recipes = await uow.feed_recipes.list(owner_id)
    return [
        RecipeWithItems(recipe=r, items=await uow.feed_recipe_items.list_by_recipe(r.id))
        for r in recipes
    ]
