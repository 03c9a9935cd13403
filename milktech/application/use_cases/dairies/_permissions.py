from __future__ import annotations

from milktech.application.errors import PermissionDenied
from milktech.domain.value_objects.user_role import UserRole


def ensure_can_manage_dairy(role: UserRole) -> None:
    if not role.can_manage_dairy():
        raise PermissionDenied("Role not allowed to manage dairies")
