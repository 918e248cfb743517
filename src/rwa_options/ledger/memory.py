"""In-memory ledger for tests and local dry runs."""

from __future__ import annotations

import asyncio


class InMemoryLedger:
    """Dict-backed `LedgerStore`.

    Every call yields to the event loop once before touching state, so concurrent tasks
    interleave the way they would against a networked store.
    """

    def __init__(self, data: dict[str, bytes] | None = None, *, available: bool = True) -> None:
        self.data: dict[str, bytes] = dict(data or {})
        self.available = available
        self.writes: list[str] = []

    async def get(self, key: str) -> bytes:
        await asyncio.sleep(0)
        return self.data.get(key, b"")

    async def set(self, key: str, value: bytes) -> None:
        await asyncio.sleep(0)
        self.data[key] = bytes(value)
        self.writes.append(key)

    async def is_available(self) -> bool:
        await asyncio.sleep(0)
        return self.available
