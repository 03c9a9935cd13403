from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from milktech.application.use_cases.bootstrap import seed_sample_data
from milktech.config.settings import Settings, get_settings
from milktech.infrastructure.auth.password import PasswordHasher
from milktech.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_schema,
    create_session_factory,
)
from milktech.infrastructure.storage.keys import DocumentKeys

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        root.addHandler(handler)
    root.setLevel(level)
    # sqlalchemy is chatty below WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(max(level, logging.WARNING))
    logging.getLogger("aiosqlite").setLevel(max(level, logging.WARNING))


@dataclass(slots=True)
class MilkTech:
    """Wired application: settings, storage and shared services."""

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    keys: DocumentKeys
    password_hasher: PasswordHasher

    def uow(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(self.session_factory, self.keys)

    async def start(self) -> None:
        await create_schema(self.engine)
        if self.settings.seed_sample_data:
            async with self.uow() as uow:
                await seed_sample_data.execute(uow)
        logger.info(
            "MilkTech storage ready (env=%s, namespace=%s)",
            self.settings.environment,
            self.keys.namespace,
        )

    async def dispose(self) -> None:
        await self.engine.dispose()


def create_app(
    *,
    settings: Settings | None = None,
    password_hasher: PasswordHasher | None = None,
) -> MilkTech:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    engine = create_engine(settings.database_url)
    return MilkTech(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        keys=DocumentKeys(settings.key_namespace),
        password_hasher=password_hasher or PasswordHasher(),
    )
