"""Test data factories for creating wallets and identity records."""
from typing import Dict, Optional, Tuple

from identity_wallet.adapters.database.manager import DatabaseManager
from identity_wallet.adapters.memory import InMemoryRecordStore
from identity_wallet.core.entities import Credential, WalletRecord


class WalletRecordFactory:
    """Factory for creating WalletRecord test instances."""

    @staticmethod
    def create(
        wallet_id: int = 1,
        enrollment_id: str = "admin",
        data: Optional[Dict[str, Credential]] = None,
    ) -> WalletRecord:
        """Create a detached WalletRecord with test data."""
        return WalletRecord(
            wallet_id=wallet_id,
            enrollment_id=enrollment_id,
            data=dict(data) if data is not None else {"certificate": "-----BEGIN CERTIFICATE-----"},
        )

    @staticmethod
    def in_memory(
        store: InMemoryRecordStore,
        wallet_id: str = "wallet-1",
        enrollment_id: str = "admin",
        data: Optional[Dict[str, Credential]] = None,
    ) -> WalletRecord:
        """Create a record in an in-memory store."""
        return store.create_record(wallet_id, enrollment_id, data)

    @staticmethod
    async def in_database(
        db_manager: DatabaseManager,
        enrollment_id: str = "admin",
        data: Optional[Dict[str, Credential]] = None,
    ) -> Tuple[int, WalletRecord]:
        """Create a wallet holding one identity record in the database.

        Returns:
            Tuple of (wallet_id, record)
        """
        wallet = await db_manager.create_wallet("test wallet")
        record = await db_manager.create_wallet_identity(wallet.id, enrollment_id, data)
        return wallet.id, record
