from __future__ import annotations

from typing import Protocol

from milktech.domain.models.tank import Tank


class TanksRepository(Protocol):
    async def add(self, tank: Tank) -> Tank: ...
    async def get(self, tank_id: str) -> Tank | None: ...
    async def all(self) -> list[Tank]: ...
    async def list_by_dairy(self, dairy_id: str) -> list[Tank]: ...
    async def put(self, tank: Tank) -> Tank | None: ...
    async def delete(self, tank_id: str) -> bool: ...
    async def replace_all(self, tanks: list[Tank]) -> None: ...
