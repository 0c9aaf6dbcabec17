"""Wallet and identity provisioning for hosting applications."""

from typing import Dict, List, Optional

import structlog

from ..adapters.database.manager import DatabaseManager
from ..adapters.wallet import WalletAdapter
from ..core.entities import Credential, WalletInfo, WalletRecord
from ..core.errors import NotFoundError

logger = structlog.get_logger()


class WalletIdentityService:
    """Owns the lifecycle of wallets and identity records.

    The WalletAdapter never creates records; this service is where they are
    created, exported and deleted, and where adapters are handed out.
    """

    def __init__(self, db_manager: DatabaseManager):
        """Initialize the identity service.

        Args:
            db_manager: Database manager used as the record store
        """
        self.db_manager = db_manager

    async def create_wallet(self, description: Optional[str] = None) -> WalletInfo:
        """Create a new, empty wallet."""
        wallet = await self.db_manager.create_wallet(description)
        logger.info("Created wallet", wallet_id=wallet.id)
        return wallet

    async def import_identity(
        self,
        wallet_id: int,
        enrollment_id: str,
        credentials: Optional[Dict[str, Credential]] = None,
    ) -> WalletRecord:
        """Enroll an identity in a wallet, optionally with initial credentials.

        Raises:
            NotFoundError: If the wallet does not exist
            StoreError: If the identity is already enrolled
        """
        record = await self.db_manager.create_wallet_identity(
            wallet_id, enrollment_id, credentials
        )
        logger.info(
            "Imported identity",
            wallet_id=wallet_id,
            enrollment_id=enrollment_id,
            credentials=len(record.data),
        )
        return record

    async def list_identities(self, wallet_id: int) -> List[str]:
        """List the enrollment IDs in a wallet."""
        if await self.db_manager.get_wallet(wallet_id) is None:
            raise NotFoundError(wallet_id)
        return await self.db_manager.list_enrollment_ids(wallet_id)

    async def open_wallet(self, wallet_id: int, enrollment_id: str) -> WalletAdapter:
        """Get a wallet for an enrolled identity.

        Raises:
            NotFoundError: If the identity is not enrolled in the wallet
        """
        await self.db_manager.find_record(wallet_id, enrollment_id)
        return WalletAdapter(self.db_manager, wallet_id, enrollment_id)

    async def export_identity(self, wallet_id: int, enrollment_id: str) -> Dict[str, Credential]:
        """Get a copy of all credentials of an enrolled identity."""
        record = await self.db_manager.find_record(wallet_id, enrollment_id)
        return dict(record.data)

    async def delete_identity(self, wallet_id: int, enrollment_id: str) -> bool:
        """Remove an identity and its credentials from a wallet."""
        deleted = await self.db_manager.delete_wallet_identity(wallet_id, enrollment_id)
        if deleted:
            logger.info("Deleted identity", wallet_id=wallet_id, enrollment_id=enrollment_id)
        else:
            logger.warning(
                "Identity not found for deletion",
                wallet_id=wallet_id,
                enrollment_id=enrollment_id,
            )
        return deleted
