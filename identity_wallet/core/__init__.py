"""Core layer for the identity wallet.

This module provides the domain entities, the error taxonomy and the
protocols that adapters implement.
"""

from .entities import Credential, WalletInfo, WalletRecord
from .errors import NotFoundError, StoreError, WalletError
from .store import RecordStore
from .wallet import Wallet

__all__ = [
    "Credential",
    "WalletInfo",
    "WalletRecord",
    "WalletError",
    "StoreError",
    "NotFoundError",
    "RecordStore",
    "Wallet",
]
