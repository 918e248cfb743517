"""Signature-gated disclosure of obscured position fields."""

from rwa_options.disclosure.authorizer import DisclosureAuthorizer
from rwa_options.disclosure.context import DisclosureContext, generate_public_key
from rwa_options.disclosure.wallet import (
    LocalKeyWallet,
    Wallet,
    account_address,
    generate_wallet_key,
    load_wallet_key,
)

__all__ = [
    "DisclosureAuthorizer",
    "DisclosureContext",
    "LocalKeyWallet",
    "Wallet",
    "account_address",
    "generate_public_key",
    "generate_wallet_key",
    "load_wallet_key",
]
