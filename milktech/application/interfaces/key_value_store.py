from __future__ import annotations

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Namespaced JSON document store.

    `get` returns `default` when the key is absent or its value cannot be
    decoded; `set` replaces the whole value stored under the key.
    """

    async def get(self, key: str, default: Any = None) -> Any: ...

    async def set(self, key: str, value: Any) -> None: ...

    async def remove(self, key: str) -> None: ...


class TransactionalKeyValueStore(KeyValueStore, Protocol):
    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

    async def close(self) -> None: ...
