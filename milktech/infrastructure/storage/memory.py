from __future__ import annotations

from typing import Any

from milktech.application.interfaces.key_value_store import TransactionalKeyValueStore
from milktech.infrastructure.storage.codec import decode, encode

_REMOVED = object()


class InMemoryKeyValueStore(TransactionalKeyValueStore):
    """Store backed by a plain dict of encoded JSON strings.

    Writes are staged until `commit`; several stores may share one `backend`
    dict to emulate separate sessions over the same profile.
    """

    def __init__(self, backend: dict[str, str] | None = None) -> None:
        self.backend: dict[str, str] = backend if backend is not None else {}
        self._pending: dict[str, Any] = {}

    async def get(self, key: str, default: Any = None) -> Any:
        raw = self._pending.get(key, self.backend.get(key))
        if raw is _REMOVED:
            return default
        return decode(key, raw, default)

    async def set(self, key: str, value: Any) -> None:
        self._pending[key] = encode(value)

    async def remove(self, key: str) -> None:
        self._pending[key] = _REMOVED

    async def commit(self) -> None:
        for key, raw in self._pending.items():
            if raw is _REMOVED:
                self.backend.pop(key, None)
            else:
                self.backend[key] = raw
        self._pending.clear()

    async def rollback(self) -> None:
        self._pending.clear()

    async def close(self) -> None:
        self._pending.clear()
