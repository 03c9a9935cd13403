from __future__ import annotations

import logging
from decimal import Decimal

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.dairy import Dairy
from milktech.domain.models.feed_recipe import FeedRecipe, FeedRecipeItem
from milktech.domain.models.price_record import PriceRecord
from milktech.domain.models.tank import Tank
from milktech.domain.value_objects.proportion_type import ProportionType
from milktech.utils.dates import now_utc

logger = logging.getLogger(__name__)

# Owner of the demo recipes when no producer is given
DEMO_OWNER_ID = "demo-owner"

_DAIRIES = [
    {
        "trade_name": "Laticínios Vale Verde",
        "cnpj": "12.345.678/0001-90",
        "phone": "(11) 98765-4321",
        "address": "Rua das Flores, 123",
        "city": "São Paulo",
        "state": "SP",
        "lat": -23.5505,
        "lng": -46.6333,
        "price": "2.15",
        "tanks": [
            {
                "name": "Tanque Central SP",
                "address": "Rua Principal, 789",
                "city": "São Paulo",
                "state": "SP",
                "lat": -23.5505,
                "lng": -46.6333,
                "responsible_name": "João Silva",
                "responsible_phone": "(11) 91234-5678",
            },
            {
                "name": "Tanque Zona Norte",
                "address": "Av. Norte, 321",
                "city": "São Paulo",
                "state": "SP",
                "lat": -23.5205,
                "lng": -46.6133,
                "responsible_name": "Maria Santos",
                "responsible_phone": "(11) 92345-6789",
            },
        ],
    },
    {
        "trade_name": "Queijaria Montanha",
        "cnpj": "98.765.432/0001-10",
        "phone": "(31) 99876-5432",
        "address": "Estrada Rural, 456",
        "city": "Belo Horizonte",
        "state": "MG",
        "lat": -19.9167,
        "lng": -43.9345,
        "price": "2.25",
        "tanks": [
            {
                "name": "Tanque MG Central",
                "address": "Rua Central, 654",
                "city": "Belo Horizonte",
                "state": "MG",
                "lat": -19.9167,
                "lng": -43.9345,
                "responsible_name": "Pedro Costa",
                "responsible_phone": "(31) 93456-7890",
            },
        ],
    },
]

_RECIPES = {
    "Ração Básica Gado Leiteiro": [("Milho", 75), ("Farelo de Soja", 20), ("Sal Mineral", 5)],
    "Ração Premium Lactação": [("Milho", 70), ("Farelo de Soja", 25), ("Sal Mineral", 5)],
}


async def execute(uow: UnitOfWork, owner_id: str | None = None) -> bool:
    """Populate the directory with demo dairies, prices, tanks and recipes.

    Runs only while the dairies document is empty; returns whether it seeded.
    """
    if await uow.dairies.all():
        return False
    owner_id = owner_id or DEMO_OWNER_ID
    now = now_utc()

    dairies, prices, tanks = [], [], []
    for sample in _DAIRIES:
        data = {k: v for k, v in sample.items() if k not in {"price", "tanks"}}
        dairy = Dairy.create(**data)
        dairies.append(dairy)
        prices.append(
            PriceRecord.create(
                dairy_id=dairy.id, price_per_liter=Decimal(sample["price"]), effective_at=now
            )
        )
        tanks.extend(Tank.create(dairy_id=dairy.id, **tank) for tank in sample["tanks"])

    recipes, items = [], []
    for name, lines in _RECIPES.items():
        recipe = FeedRecipe.create(owner_id=owner_id, name=name)
        recipes.append(recipe)
        items.extend(
            FeedRecipeItem.create(
                recipe_id=recipe.id,
                ingredient_name=ingredient,
                proportion_type=ProportionType.PERCENT,
                proportion_value=Decimal(value),
            )
            for ingredient, value in lines
        )

    await uow.dairies.replace_all(dairies)
    await uow.official_prices.replace_all(prices)
    await uow.tanks.replace_all(tanks)
    await uow.feed_recipes.replace_all(recipes)
    await uow.feed_recipe_items.replace_all(items)
    await uow.commit()
    logger.info(
        "Seeded %d dairies, %d tanks and %d recipes", len(dairies), len(tanks), len(recipes)
    )
    return True
