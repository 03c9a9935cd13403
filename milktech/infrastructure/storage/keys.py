from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocumentKeys:
    namespace: str = "milktech"

    def key(self, name: str) -> str:
        return f"{self.namespace}:{name}"

    @property
    def users(self) -> str:
        return self.key("users")

    @property
    def current_user(self) -> str:
        return self.key("current_user")

    @property
    def dairies(self) -> str:
        return self.key("dairies")

    @property
    def milk_prices(self) -> str:
        return self.key("milk_prices")

    @property
    def tanks(self) -> str:
        return self.key("tanks")

    @property
    def animals(self) -> str:
        return self.key("animals")

    @property
    def vaccines(self) -> str:
        return self.key("animal_vaccines")

    @property
    def movements(self) -> str:
        return self.key("animal_movements")

    @property
    def reproductive_events(self) -> str:
        return self.key("animal_repro")

    @property
    def feed_recipes(self) -> str:
        return self.key("feed_recipes")

    @property
    def feed_recipe_items(self) -> str:
        return self.key("feed_recipe_items")

    @property
    def personal_dairies(self) -> str:
        return self.key("my_dairies")

    def personal_dairy_prices(self, dairy_id: str) -> str:
        return self.key(f"my_dairy_prices:{dairy_id}")

    @property
    def production_entries(self) -> str:
        return self.key("milk_production")
