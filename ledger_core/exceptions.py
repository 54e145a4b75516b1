"""Custom exception hierarchy for ledger-core."""

from decimal import Decimal


class LedgerError(Exception):
    """Base exception for all ledger-core errors."""


class DuplicateAccountError(LedgerError):
    """Raised when registering an external id that is already taken."""

    def __init__(self, external_id: str) -> None:
        super().__init__(f"Customer {external_id} already exists")
        self.external_id = external_id


class AccountNotFoundError(LedgerError):
    """Raised when no account matches the given external id."""

    def __init__(self, external_id: str) -> None:
        super().__init__(f"Customer {external_id} not found")
        self.external_id = external_id


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal exceeds the current balance."""

    def __init__(self, balance: Decimal, amount: Decimal) -> None:
        super().__init__(f"Insufficient funds: balance {balance}, requested {amount}")
        self.balance = balance
        self.amount = amount


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class SinkError(LedgerError):
    """Raised when a sink operation fails."""
