"""Wallet implementation backed by a record store."""

from typing import Any, List, Optional

import structlog

from ..core.entities import Credential, WalletRecord
from ..core.store import RecordStore

logger = structlog.get_logger()


class WalletAdapter:
    """An implementation of the Wallet protocol that keeps the credentials
    of one enrolled identity in a single record of a record store.

    The adapter holds nothing but the store and the two identifiers. Every
    operation fetches the current record, and mutators save it back. There is
    no version check on save, so concurrent writers to the same identity
    overwrite each other.
    """

    def __init__(self, store: RecordStore, wallet_id: Any, enrollment_id: str):
        """Initialize the wallet adapter.

        Args:
            store: Record store holding the identity record
            wallet_id: ID of the enclosing wallet
            enrollment_id: Enrollment ID of the identity
        """
        self._store = store
        self._wallet_id = wallet_id
        self._enrollment_id = enrollment_id

    @property
    def wallet_id(self) -> Any:
        return self._wallet_id

    @property
    def enrollment_id(self) -> str:
        return self._enrollment_id

    async def _fetch(self) -> WalletRecord:
        return await self._store.find_record(self._wallet_id, self._enrollment_id)

    async def list(self) -> List[str]:
        """List all of the credential names in the wallet.

        Returns:
            Credential names in ordinal (case-sensitive) order
        """
        record = await self._fetch()
        return sorted(record.data)

    async def contains(self, name: str) -> bool:
        """Check whether the named credentials are in the wallet."""
        record = await self._fetch()
        return name in record.data

    async def get(self, name: str) -> Optional[Credential]:
        """Get the named credentials from the wallet.

        Returns:
            The credentials, or None if the wallet has none by that name
        """
        record = await self._fetch()
        return record.data.get(name)

    async def add(self, name: str, value: Credential) -> None:
        """Add credentials to the wallet, replacing any with the same name."""
        record = await self._fetch()
        record.data[name] = value
        await self._store.save_record(record)
        logger.debug(
            "Stored credentials",
            wallet_id=self._wallet_id,
            enrollment_id=self._enrollment_id,
            name=name,
        )

    async def update(self, name: str, value: Credential) -> None:
        """Update credentials in the wallet.

        Behaves exactly like add(): the credentials are written whether or
        not they already exist.
        """
        record = await self._fetch()
        record.data[name] = value
        await self._store.save_record(record)
        logger.debug(
            "Stored credentials",
            wallet_id=self._wallet_id,
            enrollment_id=self._enrollment_id,
            name=name,
        )

    async def remove(self, name: str) -> None:
        """Remove credentials from the wallet. Removing absent credentials is a no-op."""
        record = await self._fetch()
        record.data.pop(name, None)
        await self._store.save_record(record)
        logger.debug(
            "Removed credentials",
            wallet_id=self._wallet_id,
            enrollment_id=self._enrollment_id,
            name=name,
        )

    def __repr__(self) -> str:
        return f"<WalletAdapter(wallet_id={self._wallet_id!r}, enrollment_id={self._enrollment_id!r})>"
