"""In-memory account ledger: registration, statements and balances."""

from ledger_core.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InsufficientFundsError,
    LedgerError,
)
from ledger_core.models import Account, AccountSnapshot, Operation, OperationType
from ledger_core.service import BankingService
from ledger_core.store import AccountRegistry, LedgerService

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountNotFoundError",
    "AccountRegistry",
    "AccountSnapshot",
    "BankingService",
    "DuplicateAccountError",
    "InsufficientFundsError",
    "LedgerError",
    "LedgerService",
    "Operation",
    "OperationType",
]
