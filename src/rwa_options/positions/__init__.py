"""Option positions: models, obscured-field codec, index and lifecycle."""

from rwa_options.positions.codec import DEFAULT_CODEC, Base64FieldCodec, FieldCodec
from rwa_options.positions.index import PositionIndex
from rwa_options.positions.lifecycle import can_exercise, display_status, exercise, is_owner
from rwa_options.positions.models import (
    Asset,
    CatalogSummary,
    NewPosition,
    Position,
    PositionRecord,
    PositionStatus,
    PositionType,
)

__all__ = [
    "DEFAULT_CODEC",
    "Asset",
    "Base64FieldCodec",
    "CatalogSummary",
    "FieldCodec",
    "NewPosition",
    "Position",
    "PositionIndex",
    "PositionRecord",
    "PositionStatus",
    "PositionType",
    "can_exercise",
    "display_status",
    "exercise",
    "is_owner",
]
