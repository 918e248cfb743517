"""The position index: one ledger entry listing every known position id."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from rwa_options.exceptions import ParseError
from rwa_options.positions.schemas import INDEX_KEY, dump_index, parse_index

if TYPE_CHECKING:
    from rwa_options.ledger import LedgerStore

logger = structlog.get_logger()


class PositionIndex:
    """
    Append-only list of position ids stored under `position_keys`.

    `append` is a plain read-modify-write with no concurrency control. Two appends that read
    the same prior value each write back a list missing the other's id, so one id is lost.
    Callers must not assume atomicity.
    """

    def __init__(self, ledger: LedgerStore) -> None:
        self._ledger = ledger

    async def _load(self) -> list[str]:
        result = parse_index(await self._ledger.get(INDEX_KEY))
        if isinstance(result, ParseError):
            logger.warning("Ignoring malformed position index", reason=result.reason)
            return []
        return result

    async def list(self) -> list[str]:
        """Return ids in insertion order (empty when missing or malformed)."""
        return await self._load()

    async def append(self, position_id: str) -> None:
        """Fetch the current index, push `position_id`, store it back."""
        ids = await self._load()
        ids.append(position_id)
        await self._ledger.set(INDEX_KEY, dump_index(ids))
        logger.debug("Position index updated", position_id=position_id, size=len(ids))
