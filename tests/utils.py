"""Test utility functions."""

from typing import List

from sqlalchemy import select

from identity_wallet.adapters.database.manager import DatabaseManager
from identity_wallet.adapters.database.models import WalletIdentity


async def count_wallet_identities(db_manager: DatabaseManager) -> int:
    """Count the identity records in the database."""
    async with db_manager.get_session() as session:
        result = await session.execute(select(WalletIdentity))
        return len(result.scalars().all())


async def get_raw_identity_data(
    db_manager: DatabaseManager, wallet_id: int, enrollment_id: str
) -> dict:
    """Get the credential JSON exactly as stored in the database."""
    async with db_manager.get_session() as session:
        result = await session.execute(
            select(WalletIdentity.data).where(
                WalletIdentity.wallet_id == wallet_id,
                WalletIdentity.enrollment_id == enrollment_id,
            )
        )
        return result.scalar_one()


async def get_all_enrollment_ids(db_manager: DatabaseManager) -> List[str]:
    """Get every enrollment ID in the database across all wallets."""
    async with db_manager.get_session() as session:
        result = await session.execute(select(WalletIdentity.enrollment_id))
        return sorted(result.scalars().all())
