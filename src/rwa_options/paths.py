"""
Centralized path defaults for RWA Options.

All paths are relative to the current working directory and can be overridden via CLI
options or environment variables.
"""

from pathlib import Path

DEFAULT_DATA_DIR = Path("data")
DEFAULT_WALLET_KEY_PATH = DEFAULT_DATA_DIR / "wallet.pem"

__all__ = [
    "DEFAULT_DATA_DIR",
    "DEFAULT_WALLET_KEY_PATH",
]
