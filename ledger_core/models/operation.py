"""Statement operation model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from ledger_core.models.enums import OperationType


@dataclass(frozen=True)
class Operation:
    """One credit or debit entry in an account statement.

    Operations are created once, appended to a single account's statement
    and never changed afterwards. Only credits carry a description.
    """

    operation_type: OperationType
    amount: Decimal
    created_at: datetime
    description: str | None = None

    @property
    def signed_amount(self) -> Decimal:
        """Amount as it contributes to the balance."""
        if self.operation_type == OperationType.DEBIT:
            return -self.amount
        return self.amount
