"""Position lifecycle: the Exercise transition and derived display status."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rwa_options.exceptions import AuthorizationError
from rwa_options.positions.models import PositionStatus

if TYPE_CHECKING:
    from rwa_options.positions.models import Position


def is_owner(position: Position, account: str | None) -> bool:
    """Case-insensitive comparison of `account` with the position owner."""
    if not account:
        return False
    return account.lower() == position.owner.lower()


def can_exercise(position: Position, account: str | None) -> bool:
    return position.status == PositionStatus.ACTIVE and is_owner(position, account)


def exercise(position: Position, account: str | None) -> Position:
    """Return a copy of `position` moved to `exercised`.

    Only the owner may exercise, and only from `active`. Nothing else changes.

    Raises:
        AuthorizationError: Caller is not the owner or the position is not active.
    """
    if not is_owner(position, account):
        raise AuthorizationError(f"Only the owner can exercise position {position.id}")
    if position.status != PositionStatus.ACTIVE:
        raise AuthorizationError(
            f"Position {position.id} is {position.status.value}; only active positions "
            "can be exercised"
        )
    return position.model_copy(update={"status": PositionStatus.EXERCISED})


def display_status(position: Position, now: float) -> PositionStatus:
    """Status to show a user at time `now` (unix seconds).

    An active position past its expiry reads as `expired`. This is computed only; the stored
    status is never rewritten to `expired`.
    """
    if position.status == PositionStatus.ACTIVE and position.expiry <= now:
        return PositionStatus.EXPIRED
    return position.status
