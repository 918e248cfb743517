"""Pydantic models for option positions."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Asset(str, Enum):
    """Tokenized assets an option can be written on."""

    USDT = "USDT"
    USDC = "USDC"
    DAI = "DAI"
    WBTC = "WBTC"
    WETH = "WETH"


class PositionType(str, Enum):
    """Option type."""

    CALL = "call"
    PUT = "put"


class PositionStatus(str, Enum):
    """Lifecycle status of a position."""

    ACTIVE = "active"
    EXERCISED = "exercised"
    EXPIRED = "expired"


class PositionRecord(BaseModel):
    """Stored shape of a `position_<id>` ledger value.

    Field names on the wire are camelCase (`strikePrice`, `positionType`).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    asset: Asset
    strike_price: str = Field(alias="strikePrice")
    """Strike as a decimal string, e.g. "3.50"."""

    expiry: int
    """Expiry as unix seconds."""

    premium: str
    """Obscured premium (codec ciphertext)."""

    amount: str
    """Obscured amount (codec ciphertext)."""

    position_type: PositionType = Field(alias="positionType")
    owner: str
    """Account identifier of the creator."""

    status: PositionStatus = PositionStatus.ACTIVE

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> Any:
        # Older records may omit the status or store an empty value.
        if value is None or value == "":
            return PositionStatus.ACTIVE
        return value


class Position(PositionRecord):
    """A position record together with the id it is stored under."""

    id: str

    def to_record(self) -> PositionRecord:
        """Drop the id, returning the stored shape."""
        return PositionRecord.model_validate(self.model_dump(exclude={"id"}))


class NewPosition(BaseModel):
    """User input for creating a position (premium/amount still in the clear)."""

    model_config = ConfigDict(frozen=True)

    asset: Asset = Asset.USDT
    position_type: PositionType = PositionType.CALL
    strike_price: Decimal = Field(default=Decimal(0), ge=0)
    expiry_days: int = Field(default=30, ge=1, le=365)
    premium: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    amount: float = Field(default=0.0, ge=0, allow_inf_nan=False)


class CatalogSummary(BaseModel):
    """Headline counters over a loaded list of positions."""

    model_config = ConfigDict(frozen=True)

    total: int
    active: int
