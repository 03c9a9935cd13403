from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from milktech.application.errors import NotFound, ValidationError
from milktech.application.use_cases.animals import create_animal
from milktech.application.use_cases.movements import (
    list_movements,
    record_movement,
    remove_movement,
    update_movement,
)
from milktech.application.use_cases.reproduction import (
    get_state,
    list_events,
    record_event,
    remove_event,
    update_event,
)
from milktech.application.use_cases.vaccines import (
    add_vaccine,
    list_vaccines,
    remove_vaccine,
    update_vaccine,
    upcoming_vaccines,
)
from milktech.domain.value_objects.movement_type import MovementType
from milktech.domain.value_objects.reproduction import ReproEventKind, ReproStatus


@pytest.fixture()
async def animal(uow, owner_id):
    return await create_animal.execute(
        uow, owner_id, create_animal.CreateAnimalInput(name="Mimosa", earring="BR-001")
    )


async def test_vaccines_crud(uow, animal):
    first = await add_vaccine.execute(
        uow, animal.id, add_vaccine.AddVaccineInput(name="Aftosa", applied_at="2024-01-01")
    )
    await add_vaccine.execute(
        uow, animal.id, add_vaccine.AddVaccineInput(name="Brucelose", applied_at="2024-02-01")
    )

    assert [v.name for v in await list_vaccines.execute(uow, animal.id)] == [
        "Brucelose",
        "Aftosa",
    ]

    updated = await update_vaccine.execute(
        uow, first.id, update_vaccine.UpdateVaccineInput(next_due_at="2024-07-01", notes=" ok ")
    )
    assert updated.next_due_at == date(2024, 7, 1)
    assert updated.notes == "ok"

    cleared = await update_vaccine.execute(
        uow, first.id, update_vaccine.UpdateVaccineInput(next_due_at="")
    )
    assert cleared.next_due_at is None

    assert await remove_vaccine.execute(uow, first.id) is True
    assert await remove_vaccine.execute(uow, first.id) is False
    unknown = str(uuid4())
    assert await update_vaccine.execute(uow, unknown, update_vaccine.UpdateVaccineInput()) is None


async def test_add_vaccine_checks_animal_and_name(uow, animal):
    with pytest.raises(NotFound):
        await add_vaccine.execute(uow, str(uuid4()), add_vaccine.AddVaccineInput(name="Aftosa"))
    with pytest.raises(ValidationError):
        await add_vaccine.execute(uow, animal.id, add_vaccine.AddVaccineInput(name=" "))


async def test_upcoming_vaccines(uow, owner_id, animal):
    reference = date(2024, 3, 1)
    for name, due in (
        ("Hoje", "2024-03-01"),
        ("Depois", "2024-04-10"),
        ("Logo", "2024-03-05"),
        ("Passada", "2024-02-01"),
        ("Sem data", None),
    ):
        await add_vaccine.execute(
            uow, animal.id, add_vaccine.AddVaccineInput(name=name, next_due_at=due)
        )

    upcoming = await upcoming_vaccines.execute(uow, owner_id, reference=reference)

    assert [(u.vaccine.name, u.days_until) for u in upcoming] == [("Logo", 4), ("Depois", 40)]
    assert upcoming[0].animal.id == animal.id
    assert await upcoming_vaccines.execute(uow, str(uuid4()), reference=reference) == []
    assert len(await upcoming_vaccines.execute(uow, owner_id, reference=reference, limit=1)) == 1


async def test_movements(uow, animal):
    for day in ("2024-01-01", "2023-06-01", "2024-03-01", "2024-02-01"):
        await record_movement.execute(
            uow,
            record_movement.RecordMovementInput(
                animal_id=animal.id, type="TRANSFERENCIA", date=day
            ),
        )

    ordered = await list_movements.execute(uow, animal.id)
    assert [m.date for m in ordered] == sorted(m.date for m in ordered)
    recent = await list_movements.recent_for_animal(uow, animal.id)
    assert [m.date.isoformat() for m in recent] == ["2024-03-01", "2024-02-01", "2024-01-01"]
    assert all(m.type is MovementType.TRANSFER for m in ordered)

    target = ordered[0]
    updated = await update_movement.execute(
        uow, target.id, update_movement.UpdateMovementInput(type="venda", amount="4200,50")
    )
    assert updated.type is MovementType.SALE
    assert updated.amount == Decimal("4200.50")

    kept = await update_movement.execute(
        uow, target.id, update_movement.UpdateMovementInput(notes="vendida")
    )
    assert kept.amount == Decimal("4200.50")

    cleared = await update_movement.execute(
        uow, target.id, update_movement.UpdateMovementInput(amount=None)
    )
    assert cleared.amount is None

    assert await remove_movement.execute(uow, target.id) is True
    assert len(await list_movements.execute(uow, animal.id)) == 3


@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"animal_id": None, "type": "compra", "date": "2024-01-01"}, ValidationError),
        ({"type": "compra", "date": "31/01/2024"}, ValidationError),
        ({"type": "emprestimo", "date": "2024-01-01"}, ValidationError),
        ({"animal_id": "missing", "type": "compra", "date": "2024-01-01"}, NotFound),
    ],
)
async def test_record_movement_validation(uow, animal, kwargs, error):
    kwargs = {"animal_id": animal.id, **kwargs}
    if kwargs["animal_id"] == "missing":
        kwargs["animal_id"] = str(uuid4())
    with pytest.raises(error):
        await record_movement.execute(uow, record_movement.RecordMovementInput(**kwargs))


async def test_reproductive_cycle(uow, animal):
    assert (await get_state.execute(uow, animal.id)).status is ReproStatus.EMPTY

    service = await record_event.execute(
        uow, record_event.RecordEventInput(animal_id=animal.id, kind="IA", date="2024-01-10")
    )
    assert service.kind is ReproEventKind.INSEMINATION
    assert (await get_state.execute(uow, animal.id)).status is ReproStatus.SERVICED

    diagnosis = await record_event.execute(
        uow,
        record_event.RecordEventInput(
            animal_id=animal.id, kind="diagnostico", date="2024-02-15", result="positivo"
        ),
    )
    state = await get_state.execute(uow, animal.id)
    assert state.status is ReproStatus.PREGNANT
    assert state.expected_calving_date == date(2024, 10, 19)

    await update_event.execute(uow, diagnosis.id, update_event.UpdateEventInput(result="negativo"))
    assert (await get_state.execute(uow, animal.id)).status is ReproStatus.EMPTY

    calving = await record_event.execute(
        uow,
        record_event.RecordEventInput(
            animal_id=animal.id, kind="parto", date="2023-05-01", result="vivo", calf_sex="f"
        ),
    )
    assert calving.calf_sex == "F"
    assert [e.date for e in await list_events.execute(uow, animal.id)] == [
        date(2023, 5, 1),
        date(2024, 1, 10),
        date(2024, 2, 15),
    ]

    assert await remove_event.execute(uow, diagnosis.id) is True
    assert (await get_state.execute(uow, animal.id)).status is ReproStatus.SERVICED


async def test_record_event_validation(uow, animal):
    with pytest.raises(ValidationError):
        await record_event.execute(
            uow, record_event.RecordEventInput(animal_id=animal.id, kind="cio", date="2024-01-10")
        )
    with pytest.raises(NotFound):
        await record_event.execute(
            uow, record_event.RecordEventInput(animal_id=str(uuid4()), kind="ia", date="2024-01-10")
        )
