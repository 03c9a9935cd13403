from __future__ import annotations

import logging

from milktech.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, recipe_id: str) -> bool:
    """Delete a recipe and its ingredient lines."""
    deleted = await uow.feed_recipes.delete(recipe_id)
    if not deleted:
        return False
    items = await uow.feed_recipe_items.delete_by_recipe(recipe_id)
    await uow.commit()
    logger.info("Deleted feed recipe %s with %d ingredients", recipe_id, items)
    return True
