from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    PRODUCER = "producer"
    DAIRY = "dairy"

    def can_manage_dairy(self) -> bool:
        return self is UserRole.DAIRY
