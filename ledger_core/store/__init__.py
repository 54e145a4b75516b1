"""In-memory account registry and statement ledger."""

from ledger_core.store.ledger import LedgerService, compute_balance, to_amount
from ledger_core.store.registry import AccountRegistry

__all__ = ["AccountRegistry", "LedgerService", "compute_balance", "to_amount"]
