"""Core entities for the identity wallet."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union

# Credentials are opaque to the wallet: certificates, private keys, tokens.
Credential = Union[str, bytes]


@dataclass
class WalletInfo:
    """A wallet: the scope that enrolled identities live in."""

    id: int
    description: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __str__(self) -> str:
        return f"Wallet({self.id})"


@dataclass
class WalletRecord:
    """The persisted credential set of one enrolled identity.

    There is at most one record per (wallet_id, enrollment_id) pair. The
    ``data`` mapping goes from credential name to credential value and is
    written back in full whenever the record is saved.
    """

    wallet_id: Any
    enrollment_id: str
    data: Dict[str, Credential] = field(default_factory=dict)

    # Database ID
    id: Optional[int] = None

    @property
    def key(self) -> tuple:
        """Composite identity of the record."""
        return (self.wallet_id, self.enrollment_id)

    def __str__(self) -> str:
        return f"WalletRecord(wallet_id={self.wallet_id}, enrollment_id={self.enrollment_id})"
