from __future__ import annotations

from enum import Enum

_LEGACY = {"ativo": "active", "inativo": "inactive", "transferido": "transferred"}


class AnimalStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    TRANSFERRED = "transferred"

    @classmethod
    def parse(cls, value: object) -> AnimalStatus | None:
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        try:
            return cls(_LEGACY.get(text, text))
        except ValueError:
            return None
