"""Domain models for the account ledger."""

from ledger_core.models.account import Account, AccountSnapshot
from ledger_core.models.base import Event
from ledger_core.models.customer import CustomerProfile
from ledger_core.models.enums import OperationType
from ledger_core.models.operation import Operation

__all__ = [
    "Account",
    "AccountSnapshot",
    "CustomerProfile",
    "Event",
    "Operation",
    "OperationType",
]
