"""Protocol definition for the external key-value ledger."""

from __future__ import annotations

from typing import Protocol


class LedgerStore(Protocol):
    """Get/set-by-key store holding position records and the position index.

    Calls are independent: nothing is atomic across two calls.
    """

    async def get(self, key: str) -> bytes:
        """Return the stored value, or empty bytes if the key is absent."""
        ...

    async def set(self, key: str, value: bytes) -> None:
        """Store (overwrite) the value under `key`."""
        ...

    async def is_available(self) -> bool:
        """Return True if the store answers its liveness check."""
        ...
