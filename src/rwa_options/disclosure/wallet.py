"""Wallet collaborator: account identity and message signing (secp256k1 ECDSA)."""

from __future__ import annotations

import asyncio
import base64
import binascii
import hashlib
import os
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec

from rwa_options.exceptions import UserRejected

if TYPE_CHECKING:
    from collections.abc import Callable

WALLET_KEY_PATH_ENV = "RWA_WALLET_KEY_PATH"
WALLET_KEY_B64_ENV = "RWA_WALLET_KEY_B64"


class Wallet(Protocol):
    """Signs messages on behalf of one account."""

    @property
    def address(self) -> str:
        """Account identifier (`0x` + 40 hex digits)."""
        ...

    async def sign_message(self, message: str) -> str:
        """Return a signature over `message`.

        May wait on the user indefinitely. Raises `UserRejected` if they decline.
        """
        ...


def account_address(public_key: ec.EllipticCurvePublicKey) -> str:
    """Derive the account identifier from a public key.

    Last 20 bytes of SHA-256 over the uncompressed point, hex encoded.
    """
    point = public_key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint,
    )
    return "0x" + hashlib.sha256(point).digest()[-20:].hex()


def load_wallet_key(
    *,
    key_path: str | None = None,
    key_b64: str | None = None,
) -> ec.EllipticCurvePrivateKey:
    """Load an EC private key from a PEM file or base64-encoded PEM string."""
    if key_b64:
        try:
            pem_bytes = base64.b64decode(key_b64.strip(), validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("Invalid base64 wallet key") from e
    else:
        if not key_path:
            raise ValueError("key_path or key_b64 is required")
        pem_bytes = Path(key_path).expanduser().read_bytes()

    try:
        private_key = serialization.load_pem_private_key(pem_bytes, password=None)
    except (TypeError, UnsupportedAlgorithm) as e:
        raise ValueError("Encrypted or unsupported wallet key") from e
    if not isinstance(private_key, ec.EllipticCurvePrivateKey):
        raise ValueError("Invalid key type: expected EC private key")
    return private_key


def generate_wallet_key(path: Path, *, overwrite: bool = False) -> ec.EllipticCurvePrivateKey:
    """Create a new secp256k1 key and write it to `path` as unencrypted PKCS8 PEM."""
    if path.exists() and not overwrite:
        raise FileExistsError(f"Wallet key already exists: {path}")

    private_key = ec.generate_private_key(ec.SECP256K1())
    pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(pem)
    os.chmod(path, 0o600)
    return private_key


class LocalKeyWallet:
    """
    Wallet backed by a local EC private key.

    `approve` stands in for the user's confirmation prompt: it receives the message and
    returns False to decline. It runs in a worker thread so a blocking prompt does not stall
    the event loop. Without it every request is signed.
    """

    def __init__(
        self,
        private_key: ec.EllipticCurvePrivateKey,
        approve: Callable[[str], bool] | None = None,
    ) -> None:
        self._private_key = private_key
        self._approve = approve
        self._address = account_address(private_key.public_key())

    @classmethod
    def from_key(
        cls,
        *,
        key_path: str | None = None,
        key_b64: str | None = None,
        approve: Callable[[str], bool] | None = None,
    ) -> LocalKeyWallet:
        return cls(load_wallet_key(key_path=key_path, key_b64=key_b64), approve=approve)

    @property
    def address(self) -> str:
        return self._address

    @property
    def public_key(self) -> ec.EllipticCurvePublicKey:
        return self._private_key.public_key()

    async def sign_message(self, message: str) -> str:
        if self._approve is not None and not await asyncio.to_thread(self._approve, message):
            raise UserRejected()
        signature = self._private_key.sign(message.encode("utf-8"), ec.ECDSA(hashes.SHA256()))
        return "0x" + signature.hex()
