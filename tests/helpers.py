"""Test doubles shared across test modules."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import unquote

from httpx import Response

if TYPE_CHECKING:
    import httpx
    import respx

FIXED_NOW = 1_700_000_000.0


class RecordingApproval:
    """Approval callback that answers from a script and records each prompt."""

    def __init__(self, *answers: bool) -> None:
        self._answers = list(answers)
        self.messages: list[str] = []

    def __call__(self, message: str) -> bool:
        self.messages.append(message)
        return self._answers.pop(0) if self._answers else True


class FakeLedgerService:
    """Stateful respx stand-in for the ledger service's REST surface."""

    def __init__(self, base_url: str, *, available: bool = True) -> None:
        self.base_url = base_url.rstrip("/")
        self.data: dict[str, bytes] = {}
        self.available = available
        self.fail_writes = False

    def install(self, router: respx.Router | respx.MockRouter) -> None:
        data_pattern = rf"^{re.escape(self.base_url)}/data/(?P<key>[^/?]+)$"
        router.get(f"{self.base_url}/health").mock(side_effect=self._health)
        router.get(url__regex=data_pattern).mock(side_effect=self._get)
        router.put(url__regex=data_pattern).mock(side_effect=self._put)

    def _health(self, request: httpx.Request) -> Response:
        return Response(200, json={"available": self.available})

    def _get(self, request: httpx.Request, key: str) -> Response:
        value = self.data.get(unquote(key))
        if value is None:
            return Response(404)
        return Response(200, content=value)

    def _put(self, request: httpx.Request, key: str) -> Response:
        if self.fail_writes:
            return Response(500, text="write failed")
        self.data[unquote(key)] = request.content
        return Response(204)
