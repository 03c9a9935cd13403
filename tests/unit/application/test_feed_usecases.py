from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from milktech.application.errors import NotFound, ValidationError
from milktech.application.use_cases.feed import (
    add_ingredient,
    calculate_batch,
    create_recipe,
    delete_recipe,
    list_recipes,
    remove_ingredient,
    update_ingredient,
    update_recipe,
)
from milktech.domain.value_objects.proportion_type import ProportionType


async def make_recipe(uow, owner_id, name="Ração Básica"):
    recipe = await create_recipe.execute(uow, owner_id, name)
    for ingredient, kind, value in (
        ("Milho", "percent", 75),
        ("Farelo de Soja", "percent", 20),
        ("Sal Mineral", None, "5"),
    ):
        await add_ingredient.execute(
            uow,
            recipe.id,
            add_ingredient.IngredientInput(
                ingredient_name=ingredient, proportion_type=kind, proportion_value=value
            ),
        )
    return recipe


async def test_recipes_with_ingredients(uow, owner_id):
    await make_recipe(uow, owner_id, "Ração Premium")
    basic = await make_recipe(uow, owner_id, "Ração Básica")
    await create_recipe.execute(uow, str(uuid4()), "De outro produtor")

    listed = await list_recipes.execute(uow, owner_id)
    assert [r.recipe.name for r in listed] == ["Ração Básica", "Ração Premium"]
    assert [i.ingredient_name for i in listed[0].items] == [
        "Milho",
        "Farelo de Soja",
        "Sal Mineral",
    ]
    assert listed[0].items[2].proportion_type is ProportionType.PERCENT

    renamed = await update_recipe.execute(uow, basic.id, "Ração Inicial")
    assert renamed.name == "Ração Inicial"
    assert await update_recipe.execute(uow, str(uuid4()), "X") is None
    with pytest.raises(ValidationError):
        await update_recipe.execute(uow, basic.id, " ")


async def test_ingredient_validation(uow, owner_id):
    recipe = await create_recipe.execute(uow, owner_id, "Ração")
    with pytest.raises(ValidationError):
        await add_ingredient.execute(
            uow, recipe.id, add_ingredient.IngredientInput(ingredient_name="")
        )
    with pytest.raises(ValidationError):
        await add_ingredient.execute(
            uow,
            recipe.id,
            add_ingredient.IngredientInput(ingredient_name="Milho", proportion_type="litros"),
        )
    with pytest.raises(NotFound):
        await add_ingredient.execute(
            uow, str(uuid4()), add_ingredient.IngredientInput(ingredient_name="Milho")
        )

    clamped = await add_ingredient.execute(
        uow,
        recipe.id,
        add_ingredient.IngredientInput(ingredient_name="Milho", proportion_value="150"),
    )
    assert clamped.proportion_value == Decimal("100")


async def test_update_and_remove_ingredient(uow, owner_id):
    recipe = await create_recipe.execute(uow, owner_id, "Ração")
    item = await add_ingredient.execute(
        uow,
        recipe.id,
        add_ingredient.IngredientInput(
            ingredient_name="Núcleo", proportion_type="kg", proportion_value="250"
        ),
    )

    # switching to percent brings the stored value back into range
    updated = await update_ingredient.execute(
        uow, item.id, add_ingredient.IngredientInput(proportion_type="percent")
    )
    assert updated.proportion_type is ProportionType.PERCENT
    assert updated.proportion_value == Decimal("100")

    assert await remove_ingredient.execute(uow, item.id) is True
    assert await remove_ingredient.execute(uow, item.id) is False
    assert await update_ingredient.execute(uow, item.id, add_ingredient.IngredientInput()) is None


async def test_delete_recipe_removes_items(uow, owner_id):
    doomed = await make_recipe(uow, owner_id, "Ração Básica")
    kept = await make_recipe(uow, owner_id, "Ração Premium")

    assert await delete_recipe.execute(uow, doomed.id) is True
    assert await delete_recipe.execute(uow, doomed.id) is False

    assert await uow.feed_recipe_items.list_by_recipe(doomed.id) == []
    assert len(await uow.feed_recipe_items.list_by_recipe(kept.id)) == 3


async def test_calculate_batch(uow, owner_id):
    recipe = await make_recipe(uow, owner_id)

    batch = await calculate_batch.execute(uow, recipe.id, "200", "40")

    assert {i.name: i.kg for i in batch.ingredients} == {
        "Milho": Decimal("150"),
        "Farelo de Soja": Decimal("40"),
        "Sal Mineral": Decimal("10"),
    }
    assert batch.estimated_days == Decimal("5")

    with pytest.raises(ValidationError):
        await calculate_batch.execute(uow, recipe.id, 0)
    with pytest.raises(NotFound):
        await calculate_batch.execute(uow, str(uuid4()), 100)
