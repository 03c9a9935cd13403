from __future__ import annotations

from collections.abc import Callable

from milktech.application.interfaces.key_value_store import TransactionalKeyValueStore
from milktech.application.interfaces.repositories.prices import PriceHistoryRepository
from milktech.domain.value_objects.dairy_type import DairyType
from milktech.infrastructure.repos.animal_records_kv import (
    MovementsKVRepository,
    ReproductiveEventsKVRepository,
    VaccinesKVRepository,
)
from milktech.infrastructure.repos.animals_kv import AnimalsKVRepository
from milktech.infrastructure.repos.dairies_kv import (
    DairiesKVRepository,
    PersonalDairiesKVRepository,
    TanksKVRepository,
)
from milktech.infrastructure.repos.feed_recipes_kv import (
    FeedRecipeItemsKVRepository,
    FeedRecipesKVRepository,
)
from milktech.infrastructure.repos.prices_kv import (
    OfficialPricesKVRepository,
    PersonalPricesKVRepository,
)
from milktech.infrastructure.repos.production_entries_kv import ProductionEntriesKVRepository
from milktech.infrastructure.repos.users_kv import SessionKVRepository, UsersKVRepository
from milktech.infrastructure.storage.keys import DocumentKeys


class KeyValueUnitOfWork:
    def __init__(
        self,
        store_factory: Callable[[], TransactionalKeyValueStore],
        keys: DocumentKeys | None = None,
    ) -> None:
        self.store_factory = store_factory
        self.keys = keys or DocumentKeys()
        self.store: TransactionalKeyValueStore | None = None

    async def __aenter__(self) -> KeyValueUnitOfWork:
        self.store = self.store_factory()
        store, keys = self.store, self.keys
        self.users = UsersKVRepository(store, keys.users)
        self.session = SessionKVRepository(store, keys.current_user)
        self.animals = AnimalsKVRepository(store, keys.animals)
        self.vaccines = VaccinesKVRepository(store, keys.vaccines)
        self.movements = MovementsKVRepository(store, keys.movements)
        self.reproductive_events = ReproductiveEventsKVRepository(store, keys.reproductive_events)
        self.production_entries = ProductionEntriesKVRepository(store, keys.production_entries)
        self.dairies = DairiesKVRepository(store, keys.dairies)
        self.official_prices = OfficialPricesKVRepository(store, keys.milk_prices)
        self.personal_dairies = PersonalDairiesKVRepository(store, keys.personal_dairies)
        self.personal_prices = PersonalPricesKVRepository(store, keys)
        self.tanks = TanksKVRepository(store, keys.tanks)
        self.feed_recipes = FeedRecipesKVRepository(store, keys.feed_recipes)
        self.feed_recipe_items = FeedRecipeItemsKVRepository(store, keys.feed_recipe_items)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.store is None:
            return
        if exc:
            await self.store.rollback()
        await self.store.close()
        self.store = None

    async def commit(self) -> None:
        if self.store is not None:
            await self.store.commit()

    async def rollback(self) -> None:
        if self.store is not None:
            await self.store.rollback()

    def price_history(self, dairy_type: DairyType | None) -> PriceHistoryRepository:
        if dairy_type is DairyType.MINE:
            return self.personal_prices
        return self.official_prices
