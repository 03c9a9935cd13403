from __future__ import annotations

from milktech.application.interfaces.repositories.feed_recipes import (
    FeedRecipeItemsRepository,
    FeedRecipesRepository,
)
from milktech.domain.models.feed_recipe import FeedRecipe, FeedRecipeItem
from milktech.infrastructure.documents.feed import FeedRecipeDocument, FeedRecipeItemDocument
from milktech.infrastructure.repos.documents import DocumentRepository


class FeedRecipesKVRepository(DocumentRepository[FeedRecipe], FeedRecipesRepository):
    schema = FeedRecipeDocument
    model = FeedRecipe

    async def list(self, owner_id: str) -> list[FeedRecipe]:
        recipes = await self._filter(lambda r: r.owner_id == owner_id)
        return sorted(recipes, key=lambda r: r.name.lower())


class FeedRecipeItemsKVRepository(DocumentRepository[FeedRecipeItem], FeedRecipeItemsRepository):
    schema = FeedRecipeItemDocument
    model = FeedRecipeItem

    async def list_by_recipe(self, recipe_id: str) -> list[FeedRecipeItem]:
        return await self._filter(lambda i: i.recipe_id == recipe_id)

    async def delete_by_recipe(self, recipe_id: str) -> int:
        return await self._delete_where(lambda i: i.recipe_id == recipe_id)
