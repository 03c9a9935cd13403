from __future__ import annotations

import json
import logging
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

from milktech.domain.value_objects.animal_status import AnimalStatus
from milktech.domain.value_objects.shift import Shift
from milktech.infrastructure.repos.animal_records_kv import VaccinesKVRepository
from milktech.infrastructure.repos.animals_kv import AnimalsKVRepository
from milktech.infrastructure.repos.dairies_kv import PersonalDairiesKVRepository
from milktech.infrastructure.repos.prices_kv import (
    OfficialPricesKVRepository,
    PersonalPricesKVRepository,
)
from milktech.infrastructure.repos.production_entries_kv import ProductionEntriesKVRepository
from milktech.infrastructure.storage.memory import InMemoryKeyValueStore


def seed(backend, key, records):
    backend[key] = json.dumps(records)


async def test_legacy_production_record_is_backfilled(backend, keys, owner_id):
    seed(
        backend,
        keys.production_entries,
        [
            {
                "id": str(uuid4()),
                "owner_id": str(owner_id),
                "date": "2024-03-01",
                "liters": "abc",
                "unit_price_at_sale": "",
                "dairy_type": "unknown",
                "notes": None,
            },
            {
                "id": str(uuid4()),
                "owner_id": str(owner_id),
                "date": "2024-03-02T10:00:00Z",
                "shift": "AFTERNOON",
                "liters": "12,5",
            },
        ],
    )
    repo = ProductionEntriesKVRepository(InMemoryKeyValueStore(backend), keys.production_entries)

    latest, legacy = await repo.list(owner_id)

    assert legacy.shift is Shift.MORNING
    assert legacy.liters == Decimal("0")
    assert legacy.unit_price_at_sale is None
    assert legacy.dairy_type is None
    assert legacy.notes == ""
    assert latest.date == date(2024, 3, 2)
    assert latest.shift is Shift.AFTERNOON
    assert latest.liters == Decimal("12.5")


async def test_unreadable_record_is_skipped(backend, keys, owner_id, caplog):
    seed(
        backend,
        keys.production_entries,
        [
            {"owner_id": str(owner_id), "date": "2024-03-01", "liters": 10},
            {"id": str(uuid4()), "owner_id": str(owner_id), "date": "2024-03-01", "liters": 10},
        ],
    )
    repo = ProductionEntriesKVRepository(InMemoryKeyValueStore(backend), keys.production_entries)

    with caplog.at_level(logging.WARNING):
        entries = await repo.list(owner_id)

    assert len(entries) == 1
    assert "Skipping unreadable record" in caplog.text


async def test_corrupt_document_reads_as_empty(backend, keys, owner_id, caplog):
    backend[keys.production_entries] = "{not json"
    repo = ProductionEntriesKVRepository(InMemoryKeyValueStore(backend), keys.production_entries)

    with caplog.at_level(logging.WARNING):
        assert await repo.list(owner_id) == []

    assert "not valid JSON" in caplog.text


async def test_non_list_document_reads_as_empty(backend, keys, owner_id):
    seed(backend, keys.animals, {"unexpected": "object"})
    repo = AnimalsKVRepository(InMemoryKeyValueStore(backend), keys.animals)
    assert await repo.list(owner_id) == []


async def test_legacy_animal_status(backend, keys, owner_id):
    seed(
        backend,
        keys.animals,
        [
            {"id": str(uuid4()), "owner_id": str(owner_id), "name": "Mimosa", "status": "ativo"},
            {"id": str(uuid4()), "owner_id": str(owner_id), "name": "Estrela", "status": ""},
            {
                "id": str(uuid4()),
                "owner_id": str(owner_id),
                "name": "Bonita",
                "status": "transferido",
                "birth_date": "",
            },
        ],
    )
    repo = AnimalsKVRepository(InMemoryKeyValueStore(backend), keys.animals)

    animals = {a.name: a for a in await repo.list(owner_id)}

    assert animals["Mimosa"].status is AnimalStatus.ACTIVE
    assert animals["Estrela"].status is AnimalStatus.ACTIVE
    assert animals["Bonita"].status is AnimalStatus.TRANSFERRED
    assert animals["Bonita"].birth_date is None


async def test_bare_date_price_is_anchored_at_noon_utc(backend, keys):
    dairy_id = str(uuid4())
    seed(
        backend,
        keys.milk_prices,
        [{"id": str(uuid4()), "dairy_id": str(dairy_id), "price_per_liter": "2.15",
          "effective_at": "2024-03-01"}],
    )
    repo = OfficialPricesKVRepository(InMemoryKeyValueStore(backend), keys.milk_prices)

    (record,) = await repo.list_for_dairy(dairy_id)

    assert record.effective_at == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    assert record.effective_date == date(2024, 3, 1)
    assert record.price_per_liter == Decimal("2.15")


async def test_personal_prices_live_under_their_own_key(backend, keys):
    dairy_id = str(uuid4())
    store = InMemoryKeyValueStore(backend)
    repo = PersonalPricesKVRepository(store, keys)
    seed(
        backend,
        keys.personal_dairy_prices(dairy_id),
        [{"id": str(uuid4()), "dairy_id": str(dairy_id), "price_per_liter": 2.3,
          "effective_at": "2024-03-01T12:00:00+00:00"}],
    )

    assert len(await repo.list_for_dairy(dairy_id)) == 1

    await repo.delete_for_dairy(dairy_id)
    await store.commit()

    assert f"milktech:my_dairy_prices:{dairy_id}" not in backend


async def test_saved_documents_serialize_decimals_as_strings(backend, keys, owner_id):
    store = InMemoryKeyValueStore(backend)
    repo = ProductionEntriesKVRepository(store, keys.production_entries)
    seed(
        backend,
        keys.production_entries,
        [{"id": str(uuid4()), "owner_id": str(owner_id), "date": "2024-03-01", "liters": 10.5}],
    )
    entries = await repo.all()
    await repo.replace_all(entries)
    await store.commit()

    (raw,) = json.loads(backend[keys.production_entries])
    assert raw["liters"] == "10.5"
    assert raw["date"] == "2024-03-01"
    assert raw["shift"] == "morning"


async def test_ids_are_kept_as_opaque_strings(backend, keys, owner_id):
    seed(
        backend,
        keys.animals,
        [{"id": 1700000000001, "owner_id": owner_id, "name": "Mimosa", "status": "ativo"}],
    )
    seed(
        backend,
        keys.vaccines,
        [{"id": "vac-1", "animal_id": "1700000000001", "name": "Aftosa"}],
    )
    seed(
        backend,
        keys.personal_dairies,
        [{"id": "demo_d1", "owner_id": owner_id, "name": "Cooperativa Local"}],
    )
    store = InMemoryKeyValueStore(backend)

    (animal,) = await AnimalsKVRepository(store, keys.animals).list(owner_id)
    (vaccine,) = await VaccinesKVRepository(store, keys.vaccines).list_by_animal(animal.id)
    (dairy,) = await PersonalDairiesKVRepository(store, keys.personal_dairies).list(owner_id)

    assert animal.id == "1700000000001"
    assert animal.status is AnimalStatus.ACTIVE
    assert vaccine.name == "Aftosa"
    assert dairy.id == "demo_d1"


async def test_blank_id_is_still_unreadable(backend, keys, owner_id):
    seed(
        backend,
        keys.animals,
        [
            {"id": "  ", "owner_id": owner_id, "name": "Sem Id"},
            {"id": "a-1", "owner_id": owner_id, "name": "Com Id"},
        ],
    )
    repo = AnimalsKVRepository(InMemoryKeyValueStore(backend), keys.animals)
    assert [a.name for a in await repo.list(owner_id)] == ["Com Id"]
