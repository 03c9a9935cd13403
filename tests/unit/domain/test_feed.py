from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

from milktech.domain.models.feed_recipe import FeedRecipe, FeedRecipeItem
from milktech.domain.services.feed import calculate_batch, clamp_proportion
from milktech.domain.value_objects.proportion_type import ProportionType


def make_recipe(*lines):
    recipe = FeedRecipe.create(owner_id=str(uuid4()), name="Ração Básica")
    items = [
        FeedRecipeItem.create(
            recipe_id=recipe.id,
            ingredient_name=name,
            proportion_type=kind,
            proportion_value=Decimal(value),
        )
        for name, kind, value in lines
    ]
    return recipe, items


def test_clamp_proportion():
    assert clamp_proportion(ProportionType.PERCENT, Decimal("150")) == Decimal("100")
    assert clamp_proportion(ProportionType.PERCENT, Decimal("-1")) == Decimal("0")
    assert clamp_proportion(ProportionType.KG, Decimal("250")) == Decimal("250")
    assert clamp_proportion(ProportionType.KG, Decimal("-1")) == Decimal("0")


def test_percent_lines_split_target():
    recipe, items = make_recipe(
        ("Milho", ProportionType.PERCENT, "75"),
        ("Farelo de Soja", ProportionType.PERCENT, "20"),
        ("Sal Mineral", ProportionType.PERCENT, "5"),
    )
    result = calculate_batch(recipe, items, Decimal("200"), Decimal("40"))
    assert [(i.name, i.kg) for i in result.ingredients] == [
        ("Milho", Decimal("150")),
        ("Farelo de Soja", Decimal("40")),
        ("Sal Mineral", Decimal("10")),
    ]
    assert result.percent_total == Decimal("100")
    assert result.estimated_days == Decimal("5")


def test_kg_lines_are_fixed_amounts():
    recipe, items = make_recipe(
        ("Milho", ProportionType.PERCENT, "50"),
        ("Núcleo", ProportionType.KG, "3"),
    )
    result = calculate_batch(recipe, items, Decimal("100"))
    assert [i.kg for i in result.ingredients] == [Decimal("50"), Decimal("3")]
    assert result.estimated_days is None
    assert result.percent_total == Decimal("50")


def test_zero_daily_consumption_has_no_estimate():
    recipe, items = make_recipe(("Milho", ProportionType.PERCENT, "100"))
    result = calculate_batch(recipe, items, Decimal("100"), Decimal("0"))
    assert result.daily_consumption is None
    assert result.estimated_days is None
