from __future__ import annotations

from typing import Protocol

from milktech.application.interfaces.repositories.animals import AnimalsRepository
from milktech.application.interfaces.repositories.dairies import (
    DairiesRepository,
    PersonalDairiesRepository,
)
from milktech.application.interfaces.repositories.feed_recipes import (
    FeedRecipeItemsRepository,
    FeedRecipesRepository,
)
from milktech.application.interfaces.repositories.movements import MovementsRepository
from milktech.application.interfaces.repositories.prices import (
    OfficialPricesRepository,
    PriceHistoryRepository,
)
from milktech.application.interfaces.repositories.production_entries import (
    ProductionEntriesRepository,
)
from milktech.application.interfaces.repositories.reproductive_events import (
    ReproductiveEventsRepository,
)
from milktech.application.interfaces.repositories.tanks import TanksRepository
from milktech.application.interfaces.repositories.users import SessionRepository, UsersRepository
from milktech.application.interfaces.repositories.vaccines import VaccinesRepository
from milktech.domain.value_objects.dairy_type import DairyType


class UnitOfWork(Protocol):
    users: UsersRepository
    session: SessionRepository
    animals: AnimalsRepository
    vaccines: VaccinesRepository
    movements: MovementsRepository
    reproductive_events: ReproductiveEventsRepository
    production_entries: ProductionEntriesRepository
    dairies: DairiesRepository
    official_prices: OfficialPricesRepository
    personal_dairies: PersonalDairiesRepository
    personal_prices: PriceHistoryRepository
    tanks: TanksRepository
    feed_recipes: FeedRecipesRepository
    feed_recipe_items: FeedRecipeItemsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

    # Official or personal price history, by the production entry's dairy type
    def price_history(self, dairy_type: DairyType | None) -> PriceHistoryRepository: ...
