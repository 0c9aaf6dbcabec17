"""Error taxonomy for the identity wallet."""


class WalletError(Exception):
    """Base class for all identity wallet errors."""


class StoreError(WalletError):
    """The backing record store failed to fetch or persist a record."""


class NotFoundError(StoreError):
    """No record exists for the requested wallet and enrollment ID."""

    def __init__(self, wallet_id, enrollment_id=None):
        self.wallet_id = wallet_id
        self.enrollment_id = enrollment_id
        if enrollment_id is None:
            message = f"Wallet {wallet_id} not found"
        else:
            message = f"No identity '{enrollment_id}' in wallet {wallet_id}"
        super().__init__(message)
