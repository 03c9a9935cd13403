from __future__ import annotations

import logging

from milktech.application.errors import ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import clean_text
from milktech.domain.models.feed_recipe import FeedRecipe

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, owner_id: str, name: str) -> FeedRecipe:
    name = clean_text(name)
    if not name:
        raise ValidationError("Recipe name is required")
    recipe = await uow.feed_recipes.add(FeedRecipe.create(owner_id=owner_id, name=name))
    await uow.commit()
    logger.info("Created feed recipe %s", recipe.id)
    return recipe
