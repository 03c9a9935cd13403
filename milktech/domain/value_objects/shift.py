from __future__ import annotations

from enum import Enum


class Shift(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"

    @property
    def sort_key(self) -> int:
        # morning before afternoon
        return 0 if self is Shift.MORNING else 1

    @classmethod
    def parse(cls, value: object) -> Shift | None:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None
