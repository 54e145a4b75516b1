"""Account registry keyed by external id (CPF)."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterator

from ledger_core.exceptions import AccountNotFoundError, DuplicateAccountError
from ledger_core.generators.pool import UUIDPool
from ledger_core.models import Account

logger = logging.getLogger(__name__)


@dataclass
class AccountRegistry:
    """In-memory owner of every customer account.

    Lookups return the stored ``Account`` itself, so ledger mutations made
    through one handle are visible to every later lookup.

    Parameters
    ----------
    id_factory : Callable[[], str]
        Generator for ``internal_id`` values (default: a ``UUIDPool``).
    clock : Callable[[], datetime]
        Source of account creation timestamps.
    """

    id_factory: Callable[[], str] = field(default_factory=UUIDPool)
    clock: Callable[[], datetime] = datetime.now

    _accounts: dict[str, Account] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def register(self, external_id: str, display_name: str) -> Account:
        """Create an account with an empty statement.

        Raises
        ------
        DuplicateAccountError
            If ``external_id`` is already registered.
        """
        with self._lock:
            if external_id in self._accounts:
                raise DuplicateAccountError(external_id)

            account = Account(
                external_id=external_id,
                display_name=display_name,
                internal_id=self.id_factory(),
                created_at=self.clock(),
            )
            self._accounts[external_id] = account

        logger.info("Registered account %s (%s)", external_id, account.internal_id)
        return account

    def find(self, external_id: str) -> Account:
        """Return the account registered under ``external_id``.

        Raises
        ------
        AccountNotFoundError
            If no such account exists.
        """
        with self._lock:
            account = self._accounts.get(external_id)
        if account is None:
            raise AccountNotFoundError(external_id)
        return account

    def exists(self, external_id: str) -> bool:
        """Check whether ``external_id`` is registered."""
        with self._lock:
            return external_id in self._accounts

    def rename(self, account: Account, new_display_name: str) -> None:
        """Replace the display name in place."""
        with self._lock:
            old_name = account.display_name
            account.display_name = new_display_name
        logger.info("Renamed account %s: %r -> %r", account.external_id, old_name, new_display_name)

    def accounts(self) -> list[Account]:
        """All accounts in registration order."""
        with self._lock:
            return list(self._accounts.values())

    def summary(self) -> dict[str, int]:
        """Return counts of accounts and statement operations."""
        accounts = self.accounts()
        return {
            "accounts": len(accounts),
            "operations": sum(len(a.statement) for a in accounts),
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, external_id: object) -> bool:
        with self._lock:
            return external_id in self._accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts())
