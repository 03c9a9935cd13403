from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, item_id: str) -> bool:
    removed = await uow.feed_recipe_items.delete(item_id)
    if removed:
        await uow.commit()
    return removed
