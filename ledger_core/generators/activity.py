"""Random deposit/withdrawal activity for simulations."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, Sequence

from ledger_core.generators.base import BaseGenerator
from ledger_core.models.enums import OperationType


@dataclass(frozen=True)
class PlannedOperation:
    """An operation to be applied to an account by external id."""

    external_id: str
    operation_type: OperationType
    amount: Decimal
    description: str | None = None


class ActivityGenerator(BaseGenerator):
    """Generate a stream of credits and debits over a set of accounts."""

    CREDIT_DESCRIPTIONS = [
        "Salário",
        "Pix recebido",
        "TED recebida",
        "Reembolso",
        "Depósito em espécie",
        "Rendimento poupança",
    ]
    CREDIT_WEIGHT = 0.55

    # Amount ranges (BRL)
    CREDIT_RANGE = (50, 5000)
    DEBIT_RANGE = (10, 2000)

    def generate(self, external_ids: Sequence[str]) -> PlannedOperation:
        """Generate a single operation against a random account."""
        if not external_ids:
            raise ValueError("external_ids must not be empty")

        external_id = self.rng.choice(list(external_ids))
        if self.rng.random() < self.CREDIT_WEIGHT:
            return PlannedOperation(
                external_id=external_id,
                operation_type=OperationType.CREDIT,
                amount=self._amount(*self.CREDIT_RANGE),
                description=self.rng.choice(self.CREDIT_DESCRIPTIONS),
            )
        return PlannedOperation(
            external_id=external_id,
            operation_type=OperationType.DEBIT,
            amount=self._amount(*self.DEBIT_RANGE),
        )

    def generate_batch(self, external_ids: Sequence[str], count: int) -> Iterator[PlannedOperation]:
        """Generate ``count`` operations spread over ``external_ids``."""
        for _ in range(count):
            yield self.generate(external_ids)

    def _amount(self, low: int, high: int) -> Decimal:
        """Random amount with two decimal places."""
        value = self.rng.uniform(low, high)
        return Decimal(str(round(value, 2)))
