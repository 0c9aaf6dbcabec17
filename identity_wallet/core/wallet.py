"""The wallet capability set."""

from typing import List, Optional, Protocol

from .entities import Credential


class Wallet(Protocol):
    """Protocol for a named collection of credentials.

    Every operation is asynchronous because implementations may need to
    reach a backing store.
    """

    async def list(self) -> List[str]:
        """List all credential names in the wallet, sorted."""
        ...

    async def contains(self, name: str) -> bool:
        """Check whether the named credentials are in the wallet."""
        ...

    async def get(self, name: str) -> Optional[Credential]:
        """Get the named credentials, or None if they are absent."""
        ...

    async def add(self, name: str, value: Credential) -> None:
        """Add credentials to the wallet."""
        ...

    async def update(self, name: str, value: Credential) -> None:
        """Update existing credentials in the wallet."""
        ...

    async def remove(self, name: str) -> None:
        """Remove credentials from the wallet."""
        ...
