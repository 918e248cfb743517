"""Use cases over the ledger: create, list, exercise and disclose positions."""

from __future__ import annotations

import secrets
import string
import time
from enum import Enum
from typing import TYPE_CHECKING

import structlog

from rwa_options.disclosure.authorizer import DisclosureAuthorizer
from rwa_options.exceptions import ParseError, PositionNotFoundError
from rwa_options.positions import lifecycle
from rwa_options.positions.codec import DEFAULT_CODEC
from rwa_options.positions.index import PositionIndex
from rwa_options.positions.models import (
    CatalogSummary,
    Position,
    PositionStatus,
)
from rwa_options.positions.schemas import (
    dump_record,
    parse_record,
    record_key,
    replace_status,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from rwa_options.ledger import LedgerStore
    from rwa_options.positions.codec import FieldCodec
    from rwa_options.positions.models import NewPosition
    from rwa_options.session import SessionContext

logger = structlog.get_logger()

SECONDS_PER_DAY = 86_400

_ID_ALPHABET = string.digits + string.ascii_lowercase


class DisclosureField(str, Enum):
    """Obscured fields that can be disclosed."""

    PREMIUM = "premium"
    AMOUNT = "amount"


def new_position_id(now: float) -> str:
    """`<unix-millis>-<7 base36 chars>`; collisions are not checked against the store."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(7))
    return f"{int(now * 1000)}-{suffix}"


def summarize(positions: Sequence[Position]) -> CatalogSummary:
    return CatalogSummary(
        total=len(positions),
        active=sum(1 for p in positions if p.status == PositionStatus.ACTIVE),
    )


class PositionCatalog:
    """
    Orchestrates the codec, ledger, index, lifecycle and disclosure authorizer.

    Errors are raised to the caller (the CLI boundary). There are no retries, and the
    record write and index append in `create` are independent ledger calls.
    """

    def __init__(
        self,
        ledger: LedgerStore,
        session: SessionContext,
        *,
        codec: FieldCodec = DEFAULT_CODEC,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ledger = ledger
        self._session = session
        self._codec = codec
        self._clock = clock
        self._index = PositionIndex(ledger)

    @property
    def index(self) -> PositionIndex:
        return self._index

    @property
    def session(self) -> SessionContext:
        return self._session

    async def create(self, request: NewPosition) -> Position:
        """Obscure the sensitive fields, store the record, then append its id to the index."""
        wallet = self._session.require_wallet()
        now = self._clock()

        position = Position(
            id=new_position_id(now),
            asset=request.asset,
            strike_price=str(request.strike_price),
            expiry=int(now) + request.expiry_days * SECONDS_PER_DAY,
            premium=self._codec.encode(request.premium),
            amount=self._codec.encode(request.amount),
            position_type=request.position_type,
            owner=wallet.address,
            status=PositionStatus.ACTIVE,
        )

        await self._ledger.set(record_key(position.id), dump_record(position))
        await self._index.append(position.id)
        logger.info("Position created", position_id=position.id, asset=position.asset.value)
        return position

    async def get(self, position_id: str) -> Position:
        """Load a single position.

        Raises:
            PositionNotFoundError: No record under this id.
            ParseError: The stored record is malformed.
        """
        _, position = await self._load(position_id)
        return position

    async def _load(self, position_id: str) -> tuple[bytes, Position]:
        raw = await self._ledger.get(record_key(position_id))
        if not raw:
            raise PositionNotFoundError(position_id)
        result = parse_record(position_id, raw)
        if isinstance(result, ParseError):
            raise result
        return raw, result

    async def list(self) -> list[Position]:
        """All indexed positions, latest expiry first.

        Ids without a record and malformed records are skipped. An unavailable ledger yields
        an empty list.
        """
        if not await self._ledger.is_available():
            logger.warning("Ledger unavailable; no positions loaded")
            return []

        positions: list[Position] = []
        for position_id in await self._index.list():
            raw = await self._ledger.get(record_key(position_id))
            if not raw:
                logger.warning("Indexed position has no record", position_id=position_id)
                continue
            result = parse_record(position_id, raw)
            if isinstance(result, ParseError):
                logger.warning(
                    "Skipping malformed position record",
                    position_id=position_id,
                    reason=result.reason,
                )
                continue
            positions.append(result)

        positions.sort(key=lambda p: p.expiry, reverse=True)
        return positions

    async def exercise(self, position_id: str) -> Position:
        """Move an active position owned by the session account to `exercised`.

        Raises:
            AuthorizationError: Not the owner, or the position is not active. Nothing is
                written.

        Only `status` changes in the stored record. Every other stored key is written back
        exactly as it was read.
        """
        raw, position = await self._load(position_id)
        updated = lifecycle.exercise(position, self._session.account)
        await self._ledger.set(record_key(position_id), replace_status(raw, updated.status))
        logger.info("Position exercised", position_id=position_id)
        return updated

    async def disclose(self, position: Position, field: DisclosureField | str) -> float:
        """Reveal one obscured field after a fresh signature from the session wallet."""
        field = DisclosureField(field)
        authorizer = DisclosureAuthorizer(
            wallet=self._session.require_wallet(),
            context=self._session.disclosure,
            codec=self._codec,
        )
        ciphertext = position.premium if field == DisclosureField.PREMIUM else position.amount
        return await authorizer.disclose(ciphertext)
