from __future__ import annotations

from typing import Protocol

from milktech.domain.models.feed_recipe import FeedRecipe, FeedRecipeItem


class FeedRecipesRepository(Protocol):
    async def add(self, recipe: FeedRecipe) -> FeedRecipe: ...
    async def get(self, recipe_id: str) -> FeedRecipe | None: ...
    async def list(self, owner_id: str) -> list[FeedRecipe]: ...
    async def put(self, recipe: FeedRecipe) -> FeedRecipe | None: ...
    async def delete(self, recipe_id: str) -> bool: ...
    async def replace_all(self, recipes: list[FeedRecipe]) -> None: ...


class FeedRecipeItemsRepository(Protocol):
    async def add(self, item: FeedRecipeItem) -> FeedRecipeItem: ...
    async def get(self, item_id: str) -> FeedRecipeItem | None: ...
    async def list_by_recipe(self, recipe_id: str) -> list[FeedRecipeItem]: ...
    async def put(self, item: FeedRecipeItem) -> FeedRecipeItem | None: ...
    async def delete(self, item_id: str) -> bool: ...
    async def delete_by_recipe(self, recipe_id: str) -> int: ...
    async def replace_all(self, items: list[FeedRecipeItem]) -> None: ...
