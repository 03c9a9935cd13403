from __future__ import annotations

from datetime import date
from decimal import Decimal

from milktech.application.use_cases.animals import create_animal
from milktech.application.use_cases.bootstrap import seed_sample_data
from milktech.application.use_cases.dashboard import producer_summary
from milktech.application.use_cases.production import upsert_entry
from milktech.application.use_cases.vaccines import add_vaccine


async def test_seed_runs_once(uow, owner_id):
    assert await seed_sample_data.execute(uow, owner_id) is True
    assert await seed_sample_data.execute(uow, owner_id) is False

    dairies = await uow.dairies.all()
    assert {d.trade_name for d in dairies} == {"Laticínios Vale Verde", "Queijaria Montanha"}
    assert len(await uow.tanks.all()) == 3
    recipes = await uow.feed_recipes.list(owner_id)
    assert [r.name for r in recipes] == [
        "Ração Básica Gado Leiteiro",
        "Ração Premium Lactação",
    ]
    for recipe in recipes:
        items = await uow.feed_recipe_items.list_by_recipe(recipe.id)
        assert sum(i.proportion_value for i in items) == Decimal("100")


async def test_seed_defaults_to_demo_owner(uow):
    await seed_sample_data.execute(uow)
    assert len(await uow.feed_recipes.list(seed_sample_data.DEMO_OWNER_ID)) == 2


async def test_producer_summary(uow, owner_id):
    await seed_sample_data.execute(uow, owner_id)
    animal = await create_animal.execute(
        uow, owner_id, create_animal.CreateAnimalInput(name="Mimosa", earring="BR-001")
    )
    await add_vaccine.execute(
        uow, animal.id, add_vaccine.AddVaccineInput(name="Aftosa", next_due_at="2024-03-25")
    )
    for day, shift, liters, price in (
        ("2024-03-10", "morning", 10, "2.15"),
        ("2024-03-11", "afternoon", 3, "2.333"),
        ("2024-02-28", "morning", 50, "2.15"),
    ):
        await upsert_entry.execute(
            uow,
            owner_id,
            upsert_entry.UpsertEntryInput(
                date=day, shift=shift, liters=liters, unit_price_at_sale=price
            ),
        )

    summary = await producer_summary.execute(uow, owner_id, reference=date(2024, 3, 20))

    assert [s.dairy.trade_name for s in summary.top_dairies] == [
        "Queijaria Montanha",
        "Laticínios Vale Verde",
    ]
    assert [(u.vaccine.name, u.days_until) for u in summary.upcoming_vaccines] == [("Aftosa", 5)]
    assert summary.total_animals == 1
    assert summary.total_recipes == 2
    assert summary.month.total == Decimal("13")
    assert summary.month.gross_revenue == Decimal("28.50")
    assert [(p.label, p.total) for p in summary.sparkline] == [
        ("10/03", Decimal("10")),
        ("11/03", Decimal("3")),
    ]
