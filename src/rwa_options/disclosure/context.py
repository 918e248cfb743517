"""Per-session disclosure context and the canonical message built from it."""

from __future__ import annotations

import secrets

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DURATION_DAYS = 30
PUBLIC_KEY_HEX_DIGITS = 2000


def generate_public_key() -> str:
    """Random `0x`-prefixed session key material (2000 hex digits)."""
    return "0x" + secrets.token_hex(PUBLIC_KEY_HEX_DIGITS // 2)


class DisclosureContext(BaseModel):
    """Values fixed at session start and repeated in every disclosure message."""

    model_config = ConfigDict(frozen=True)

    public_key: str
    contract_address: str
    chain_id: int
    start_timestamp: int
    """Session start, unix seconds."""

    duration_days: int = Field(default=DEFAULT_DURATION_DAYS, ge=1)

    def message(self) -> str:
        """Canonical newline-joined message, fields in fixed order."""
        return "\n".join(
            [
                f"publickey:{self.public_key}",
                f"contractAddresses:{self.contract_address}",
                f"contractsChainId:{self.chain_id}",
                f"startTimestamp:{self.start_timestamp}",
                f"durationDays:{self.duration_days}",
            ]
        )
