"""In-memory record store."""

import copy
import logging
from typing import Any, Dict, Optional, Tuple

from ...core.entities import Credential, WalletRecord
from ...core.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)


class InMemoryRecordStore:
    """Record store that keeps wallet records in a process-local dict.

    Records are copied on the way in and on the way out, so a fetched record
    can be mutated freely without touching the stored one until it is saved.
    """

    def __init__(self):
        self._records: Dict[Tuple[Any, str], WalletRecord] = {}
        self._next_id = 1

    def create_record(
        self,
        wallet_id: Any,
        enrollment_id: str,
        data: Optional[Dict[str, Credential]] = None,
    ) -> WalletRecord:
        """Create the record for a wallet and enrollment ID.

        Raises:
            StoreError: If a record already exists for the pair
        """
        key = (wallet_id, enrollment_id)
        if key in self._records:
            raise StoreError(
                f"Identity '{enrollment_id}' already exists in wallet {wallet_id}"
            )

        record = WalletRecord(
            wallet_id=wallet_id,
            enrollment_id=enrollment_id,
            data=dict(data or {}),
            id=self._next_id,
        )
        self._next_id += 1
        self._records[key] = copy.deepcopy(record)
        logger.debug(f"Created record for {enrollment_id} in wallet {wallet_id}")
        return record

    def delete_record(self, wallet_id: Any, enrollment_id: str) -> bool:
        """Delete the record for a wallet and enrollment ID."""
        return self._records.pop((wallet_id, enrollment_id), None) is not None

    async def find_record(self, wallet_id: Any, enrollment_id: str) -> WalletRecord:
        record = self._records.get((wallet_id, enrollment_id))
        if record is None:
            raise NotFoundError(wallet_id, enrollment_id)
        return copy.deepcopy(record)

    async def save_record(self, record: WalletRecord) -> None:
        if record.key not in self._records:
            raise NotFoundError(record.wallet_id, record.enrollment_id)
        self._records[record.key] = copy.deepcopy(record)

    def __len__(self) -> int:
        return len(self._records)
