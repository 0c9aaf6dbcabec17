"""Identity Wallet: named credential storage for enrolled identities."""

from .adapters.memory import InMemoryRecordStore
from .adapters.wallet import WalletAdapter
from .core import (
    Credential,
    NotFoundError,
    RecordStore,
    StoreError,
    Wallet,
    WalletError,
    WalletInfo,
    WalletRecord,
)

__all__ = [
    "WalletAdapter",
    "InMemoryRecordStore",
    "Credential",
    "WalletInfo",
    "WalletRecord",
    "WalletError",
    "StoreError",
    "NotFoundError",
    "RecordStore",
    "Wallet",
]
