"""Account models for the ledger."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from ledger_core.models.operation import Operation


@dataclass
class Account:
    """Customer account record owning its statement.

    ``external_id`` (the customer's CPF) is the lookup key and never changes.
    ``internal_id`` is an opaque generated identifier kept for display and
    external reference only.
    """

    external_id: str
    display_name: str
    internal_id: str
    created_at: datetime
    statement: list[Operation] = field(default_factory=list)


@dataclass(frozen=True)
class AccountSnapshot:
    """Point-in-time copy of an account, including its balance."""

    external_id: str
    display_name: str
    internal_id: str
    created_at: datetime
    balance: Decimal
    statement: tuple[Operation, ...] = ()
