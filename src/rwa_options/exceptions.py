"""Exception hierarchy for option position handling."""

from __future__ import annotations


class RwaOptionsError(Exception):
    """Base exception for all position, ledger and disclosure errors."""


class DecodeError(RwaOptionsError):
    """Obscured-field ciphertext could not be decoded."""

    def __init__(self, ciphertext: str, reason: str) -> None:
        self.ciphertext = ciphertext
        self.reason = reason
        super().__init__(f"Cannot decode obscured field: {reason}")


class ParseError(RwaOptionsError):
    """Stored ledger payload (index or record) is malformed."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Malformed ledger value at {key!r}: {reason}")


class NetworkError(RwaOptionsError):
    """Ledger service unreachable or a ledger call failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(f"Ledger error: {message}")
        else:
            super().__init__(f"Ledger error {status_code}: {message}")


class UserRejected(RwaOptionsError):
    """The user declined a signature request."""

    def __init__(self, message: str = "Signature request rejected by user") -> None:
        super().__init__(message)


class AuthorizationError(RwaOptionsError):
    """Lifecycle transition not permitted for this caller or position state."""


class PositionNotFoundError(RwaOptionsError):
    """No record stored for the requested position id."""

    def __init__(self, position_id: str) -> None:
        self.position_id = position_id
        super().__init__(f"Position not found: {position_id}")
