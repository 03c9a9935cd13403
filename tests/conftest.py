from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path
from uuid import uuid4

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from milktech.bootstrap import MilkTech, create_app
from milktech.config.settings import Settings
from milktech.infrastructure.auth.password import PasswordHasher
from milktech.infrastructure.storage.keys import DocumentKeys
from milktech.infrastructure.storage.memory import InMemoryKeyValueStore
from milktech.infrastructure.unit_of_work import KeyValueUnitOfWork


@pytest.fixture()
def owner_id() -> str:
    return str(uuid4())


@pytest.fixture()
def keys() -> DocumentKeys:
    return DocumentKeys("milktech")


@pytest.fixture()
def backend() -> dict[str, str]:
    """Raw committed documents shared by every in-memory unit of work of a test."""
    return {}


@pytest.fixture()
def uow_factory(backend: dict[str, str], keys: DocumentKeys) -> Callable[[], KeyValueUnitOfWork]:
    return lambda: KeyValueUnitOfWork(lambda: InMemoryKeyValueStore(backend), keys)


@pytest.fixture()
async def uow(uow_factory) -> AsyncIterator[KeyValueUnitOfWork]:
    async with uow_factory() as uow:
        yield uow


@pytest.fixture(scope="session")
def password_hasher() -> PasswordHasher:
    # minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "key_namespace": "milktech",
            "log_level": "INFO",
            "environment": "test",
            "seed_sample_data": False,
        }
    )


@pytest.fixture()
async def app(test_settings: Settings, password_hasher: PasswordHasher) -> AsyncIterator[MilkTech]:
    app = create_app(settings=test_settings, password_hasher=password_hasher)
    await app.start()
    yield app
    await app.dispose()
