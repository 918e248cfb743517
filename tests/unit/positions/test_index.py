"""
Tests for the position index (append-only, read-modify-write).
"""

from __future__ import annotations

import asyncio

import pytest

from rwa_options.ledger import InMemoryLedger
from rwa_options.positions.index import PositionIndex
from rwa_options.positions.schemas import INDEX_KEY


class TestPositionIndex:
    @pytest.mark.asyncio
    async def test_empty_ledger_lists_nothing(self) -> None:
        index = PositionIndex(InMemoryLedger())
        assert await index.list() == []

    @pytest.mark.asyncio
    async def test_append_then_list_contains_id(self) -> None:
        ledger = InMemoryLedger()
        index = PositionIndex(ledger)

        await index.append("p1")

        assert await index.list() == ["p1"]
        assert ledger.data[INDEX_KEY] == b'["p1"]'

    @pytest.mark.asyncio
    async def test_sequential_appends_preserve_prior_ids(self) -> None:
        index = PositionIndex(InMemoryLedger())

        for position_id in ("p1", "p2", "p3"):
            await index.append(position_id)

        assert await index.list() == ["p1", "p2", "p3"]

    @pytest.mark.asyncio
    async def test_malformed_index_lists_empty(self) -> None:
        index = PositionIndex(InMemoryLedger({INDEX_KEY: b"{oops"}))
        assert await index.list() == []

    @pytest.mark.asyncio
    async def test_append_over_malformed_index_starts_fresh(self) -> None:
        ledger = InMemoryLedger({INDEX_KEY: b"{oops"})
        index = PositionIndex(ledger)

        await index.append("p1")

        assert await index.list() == ["p1"]

    @pytest.mark.asyncio
    async def test_concurrent_appends_can_lose_an_update(self) -> None:
        """Two appends reading the same prior index: the later write drops the other id."""
        ledger = InMemoryLedger()
        index = PositionIndex(ledger)
        await index.append("existing")

        await asyncio.gather(index.append("a"), index.append("b"))

        ids = await index.list()
        assert ids[0] == "existing"
        assert len(ids) == 2
        assert ("a" in ids) != ("b" in ids)
