"""Record store protocol consumed by the wallet adapter."""

from typing import Any, Protocol

from .entities import WalletRecord


class RecordStore(Protocol):
    """Protocol for persistence backends holding wallet records."""

    async def find_record(self, wallet_id: Any, enrollment_id: str) -> WalletRecord:
        """Fetch the record for a wallet and enrollment ID.

        Raises:
            NotFoundError: If no such record exists
            StoreError: If the backend fails
        """
        ...

    async def save_record(self, record: WalletRecord) -> None:
        """Persist the full record, including its credential data.

        Raises:
            NotFoundError: If the record no longer exists
            StoreError: If the backend fails
        """
        ...
