"""
Tests for the local signing wallet.
"""

from __future__ import annotations

import base64
import re
import threading
from typing import TYPE_CHECKING

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from rwa_options.disclosure.wallet import (
    LocalKeyWallet,
    account_address,
    generate_wallet_key,
    load_wallet_key,
)
from rwa_options.exceptions import UserRejected
from tests.helpers import RecordingApproval

if TYPE_CHECKING:
    from pathlib import Path


class TestWalletKeys:
    def test_generate_then_load_from_path(self, tmp_path: Path) -> None:
        path = tmp_path / "keys" / "wallet.pem"

        generated = generate_wallet_key(path)
        loaded = load_wallet_key(key_path=str(path))

        assert (path.stat().st_mode & 0o777) == 0o600
        assert account_address(loaded.public_key()) == account_address(generated.public_key())

    def test_generate_refuses_to_overwrite(self, tmp_path: Path) -> None:
        path = tmp_path / "wallet.pem"
        generate_wallet_key(path)

        with pytest.raises(FileExistsError):
            generate_wallet_key(path)

        generate_wallet_key(path, overwrite=True)

    def test_load_from_base64(self, tmp_path: Path) -> None:
        path = tmp_path / "wallet.pem"
        generated = generate_wallet_key(path)
        key_b64 = base64.b64encode(path.read_bytes()).decode()

        loaded = load_wallet_key(key_b64=key_b64)

        assert account_address(loaded.public_key()) == account_address(generated.public_key())

    def test_load_invalid_base64(self) -> None:
        with pytest.raises(ValueError, match="Invalid base64 wallet key"):
            load_wallet_key(key_b64="not base64!")

    def test_load_requires_a_source(self) -> None:
        with pytest.raises(ValueError, match="required"):
            load_wallet_key()

    def test_load_rejects_rsa_key(self, tmp_path: Path) -> None:
        rsa_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        path = tmp_path / "rsa.pem"
        path.write_bytes(
            rsa_key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
        )

        with pytest.raises(ValueError, match="expected EC private key"):
            load_wallet_key(key_path=str(path))

    def test_load_rejects_encrypted_key(self, tmp_path: Path) -> None:
        path = tmp_path / "encrypted.pem"
        path.write_bytes(
            ec.generate_private_key(ec.SECP256K1()).private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.BestAvailableEncryption(b"secret"),
            )
        )

        with pytest.raises(ValueError, match="Encrypted or unsupported"):
            load_wallet_key(key_path=str(path))


class TestLocalKeyWallet:
    def test_address_format(self) -> None:
        wallet = LocalKeyWallet(ec.generate_private_key(ec.SECP256K1()))
        assert re.fullmatch(r"0x[0-9a-f]{40}", wallet.address)

    @pytest.mark.asyncio
    async def test_signature_verifies_against_public_key(self) -> None:
        wallet = LocalKeyWallet(ec.generate_private_key(ec.SECP256K1()))

        signature = await wallet.sign_message("hello")

        assert signature.startswith("0x")
        wallet.public_key.verify(
            bytes.fromhex(signature[2:]), b"hello", ec.ECDSA(hashes.SHA256())
        )

    @pytest.mark.asyncio
    async def test_declined_approval_raises_user_rejected(self) -> None:
        approval = RecordingApproval(False)
        wallet = LocalKeyWallet(ec.generate_private_key(ec.SECP256K1()), approve=approval)

        with pytest.raises(UserRejected):
            await wallet.sign_message("hello")

        assert approval.messages == ["hello"]

    @pytest.mark.asyncio
    async def test_approval_runs_off_the_event_loop_thread(self) -> None:
        threads: list[threading.Thread] = []

        def approve(message: str) -> bool:
            threads.append(threading.current_thread())
            return True

        wallet = LocalKeyWallet(ec.generate_private_key(ec.SECP256K1()), approve=approve)

        await wallet.sign_message("hello")

        assert threads
        assert threads[0] is not threading.main_thread()
