"""Application layer for the identity wallet.

This layer orchestrates wallet and identity lifecycles on top of the
record stores.
"""

from .identity_service import WalletIdentityService

__all__ = ["WalletIdentityService"]
