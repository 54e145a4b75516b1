"""Statement ledger: credits, debits, balances and date filtering."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Callable

from ledger_core.exceptions import InsufficientFundsError
from ledger_core.models import Account, AccountSnapshot, Operation, OperationType

logger = logging.getLogger(__name__)

Amount = Decimal | int | float | str


def to_amount(value: Amount) -> Decimal:
    """Coerce a numeric input to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")``. No sign
    check is made here.
    """
    if isinstance(value, bool):
        raise TypeError("amount must be numeric, got bool")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {value!r}") from e
    else:
        raise TypeError(f"amount must be numeric, got {type(value).__name__}")

    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def compute_balance(statement: list[Operation]) -> Decimal:
    """Fold a statement in insertion order: credits add, debits subtract."""
    balance = Decimal("0")
    for operation in statement:
        balance += operation.signed_amount
    return balance


@dataclass
class LedgerService:
    """Append-only statement operations on resolved accounts.

    Every operation on an account runs under that account's lock, so a
    withdrawal's balance check and its append cannot interleave with another
    operation on the same account. Accounts never share a lock.

    Parameters
    ----------
    clock : Callable[[], datetime]
        Source of ``created_at`` timestamps for new operations.
    """

    clock: Callable[[], datetime] = datetime.now

    _locks: dict[str, threading.Lock] = field(default_factory=dict, repr=False)
    _locks_guard: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def _lock_for(self, account: Account) -> threading.Lock:
        """Return the lock for ``account``, creating it on first use."""
        with self._locks_guard:
            lock = self._locks.get(account.internal_id)
            if lock is None:
                lock = self._locks[account.internal_id] = threading.Lock()
            return lock

    def deposit(self, account: Account, amount: Amount, description: str | None = None) -> Operation:
        """Append a credit to the account statement.

        Zero and negative amounts are accepted as given.
        """
        value = to_amount(amount)
        with self._lock_for(account):
            operation = Operation(
                operation_type=OperationType.CREDIT,
                amount=value,
                created_at=self.clock(),
                description=description,
            )
            account.statement.append(operation)

        logger.debug("Credit %s on account %s", value, account.external_id)
        return operation

    def withdraw(self, account: Account, amount: Amount) -> Operation:
        """Append a debit if the balance covers ``amount``.

        A withdrawal equal to the balance succeeds and leaves it at zero.

        Raises
        ------
        ValueError
            If ``amount`` is negative.
        InsufficientFundsError
            If the balance is strictly lower than ``amount``. The statement
            is left untouched.
        """
        value = to_amount(amount)
        if value < 0:
            raise ValueError(f"Withdrawal amount must not be negative: {value}")
        with self._lock_for(account):
            balance = compute_balance(account.statement)
            if balance < value:
                raise InsufficientFundsError(balance, value)

            operation = Operation(
                operation_type=OperationType.DEBIT,
                amount=value,
                created_at=self.clock(),
            )
            account.statement.append(operation)

        logger.debug("Debit %s on account %s", value, account.external_id)
        return operation

    def compute_balance(self, account: Account) -> Decimal:
        """Current balance: credits minus debits."""
        with self._lock_for(account):
            return compute_balance(account.statement)

    def get_statement(self, account: Account) -> list[Operation]:
        """Full statement in insertion order."""
        with self._lock_for(account):
            return list(account.statement)

    def get_statement_by_date(self, account: Account, day: date | datetime) -> list[Operation]:
        """Operations created on the calendar day of ``day``.

        A ``datetime`` argument is truncated to its date. ``created_at`` is
        compared in whatever zone the clock produced it; no conversion is
        applied.
        """
        if isinstance(day, datetime):
            day = day.date()
        with self._lock_for(account):
            return [op for op in account.statement if op.created_at.date() == day]

    def account_info(self, account: Account) -> AccountSnapshot:
        """Frozen copy of the account with its current balance."""
        with self._lock_for(account):
            statement = tuple(account.statement)
            return AccountSnapshot(
                external_id=account.external_id,
                display_name=account.display_name,
                internal_id=account.internal_id,
                created_at=account.created_at,
                balance=compute_balance(account.statement),
                statement=statement,
            )
