"""Signature-gated disclosure of obscured fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from rwa_options.exceptions import UserRejected
from rwa_options.positions.codec import DEFAULT_CODEC

if TYPE_CHECKING:
    from rwa_options.disclosure.context import DisclosureContext
    from rwa_options.disclosure.wallet import Wallet
    from rwa_options.positions.codec import FieldCodec

logger = structlog.get_logger()


class DisclosureAuthorizer:
    """
    Reveals an obscured field only after the wallet signs the session's disclosure message.

    The signature is a gate and nothing more: it is not verified, it is not bound to the
    ciphertext, and decoding runs through the codec regardless of what was signed. Every call
    to `disclose` asks for a new signature; nothing is cached between fields or calls.
    """

    def __init__(
        self,
        wallet: Wallet,
        context: DisclosureContext,
        codec: FieldCodec = DEFAULT_CODEC,
    ) -> None:
        self._wallet = wallet
        self._context = context
        self._codec = codec

    @property
    def context(self) -> DisclosureContext:
        return self._context

    def build_message(self) -> str:
        return self._context.message()

    async def request_signature(self, message: str) -> str:
        """Ask the wallet to sign `message`.

        Raises:
            UserRejected: The user declined.
        """
        logger.info("Signature requested", account=self._wallet.address)
        try:
            signature = await self._wallet.sign_message(message)
        except UserRejected:
            logger.info("Signature rejected", account=self._wallet.address)
            raise
        logger.info("Signature granted", account=self._wallet.address)
        return signature

    async def disclose(self, ciphertext: str) -> float:
        """Sign the disclosure message, then decode `ciphertext`.

        Raises:
            UserRejected: Signature declined; nothing is decoded.
            DecodeError: Signature granted but the ciphertext is malformed.
        """
        await self.request_signature(self.build_message())
        return self._codec.decode(ciphertext)
