from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from milktech.domain.models.feed_recipe import FeedRecipe, FeedRecipeItem
from milktech.domain.value_objects.proportion_type import ProportionType

HUNDRED = Decimal("100")


@dataclass(slots=True)
class IngredientAmount:
    name: str
    kg: Decimal


@dataclass(slots=True)
class BatchCalculation:
    recipe_id: str
    recipe_name: str
    target_kg: Decimal
    daily_consumption: Decimal | None = None
    estimated_days: Decimal | None = None
    percent_total: Decimal = Decimal("0")
    ingredients: list[IngredientAmount] = field(default_factory=list)


def clamp_proportion(proportion_type: ProportionType, value: Decimal) -> Decimal:
    if proportion_type is ProportionType.PERCENT:
        return min(max(value, Decimal("0")), HUNDRED)
    return max(value, Decimal("0"))


def calculate_batch(
    recipe: FeedRecipe,
    items: Sequence[FeedRecipeItem],
    target_kg: Decimal,
    daily_consumption: Decimal | None = None,
) -> BatchCalculation:
    """Split `target_kg` of feed into per-ingredient quantities.

    Percent lines take their share of the target; kg lines are fixed amounts.
    `estimated_days` is how long the batch lasts at `daily_consumption`.
    """
    ingredients = []
    percent_total = Decimal("0")
    for item in items:
        if item.proportion_type is ProportionType.PERCENT:
            percent_total += item.proportion_value
            kg = target_kg * item.proportion_value / HUNDRED
        else:
            kg = item.proportion_value
        ingredients.append(IngredientAmount(name=item.ingredient_name, kg=kg))
    daily = daily_consumption if daily_consumption and daily_consumption > 0 else None
    return BatchCalculation(
        recipe_id=recipe.id,
        recipe_name=recipe.name,
        target_kg=target_kg,
        daily_consumption=daily,
        estimated_days=(target_kg / daily) if daily else None,
        percent_total=percent_total,
        ingredients=ingredients,
    )
