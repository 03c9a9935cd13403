from __future__ import annotations

from enum import Enum


class DairyType(str, Enum):
    OFFICIAL = "official"
    MINE = "mine"

    @classmethod
    def parse(cls, value: object) -> DairyType | None:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None
