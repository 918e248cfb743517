"""Async HTTP client for the key-value ledger service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx
import structlog

from rwa_options.exceptions import NetworkError
from rwa_options.ledger.config import LedgerConfig, get_config

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


logger = structlog.get_logger()


class LedgerClient:
    """
    Thin adapter over the ledger service's REST surface.

    - `GET /data/{key}` returns the raw stored bytes (404 or empty body means absent)
    - `PUT /data/{key}` stores the request body
    - `GET /health` returns `{"available": bool}`

    No retries: every failure surfaces as `NetworkError` and the caller decides what to do.
    """

    def __init__(
        self,
        config: LedgerConfig | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._config = config or get_config()
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=timeout,
        )

    @property
    def config(self) -> LedgerConfig:
        """Configuration this client was built with."""
        return self._config

    async def __aenter__(self) -> LedgerClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    @staticmethod
    def _data_path(key: str) -> str:
        return f"/data/{quote(key, safe='')}"

    async def _send(
        self, call: Callable[[], Awaitable[httpx.Response]], *, op: str, key: str
    ) -> httpx.Response:
        try:
            return await call()
        except httpx.HTTPError as e:
            logger.warning("Ledger request failed", op=op, key=key, error=str(e))
            raise NetworkError(str(e) or type(e).__name__) from e

    async def get(self, key: str) -> bytes:
        """Fetch the value stored under `key` (empty bytes if absent)."""
        path = self._data_path(key)
        response = await self._send(lambda: self._client.get(path), op="get", key=key)

        if response.status_code == 404:
            return b""
        if response.status_code >= 400:
            raise NetworkError(response.text, status_code=response.status_code)
        return response.content

    async def set(self, key: str, value: bytes) -> None:
        """Store `value` under `key`, overwriting any previous value."""
        path = self._data_path(key)
        response = await self._send(
            lambda: self._client.put(
                path,
                content=value,
                headers={"Content-Type": "application/octet-stream"},
            ),
            op="set",
            key=key,
        )
        if response.status_code >= 400:
            raise NetworkError(response.text, status_code=response.status_code)
        logger.debug("Ledger value stored", key=key, size=len(value))

    async def is_available(self) -> bool:
        """Liveness check; transport failures count as unavailable."""
        try:
            response = await self._client.get("/health")
        except httpx.HTTPError as e:
            logger.warning("Ledger liveness check failed", error=str(e))
            return False

        if response.status_code >= 400:
            return False
        try:
            data = response.json()
        except ValueError:
            return False
        return isinstance(data, dict) and data.get("available") is True
