"""Account ledger service: the operations exposed to request handlers.

A request handler resolves an account once and passes the returned handle
to every later call::

    service = BankingService()
    service.create_account("111.444.777-35", "Alice")
    account = service.resolve_account("111.444.777-35")
    service.deposit(account, 100, "salary")
    service.withdraw(account, 40)
    service.get_balance(account)   # Decimal("60")

Errors (``DuplicateAccountError``, ``AccountNotFoundError``,
``InsufficientFundsError``) propagate to the caller unchanged; mapping them
to a transport response is the handler's job. Events are published after
the change is stored; a ``SinkError`` from the event sink is logged and
never reported as a failure of the operation.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Protocol

from ledger_core.config import LedgerConfig
from ledger_core.exceptions import SinkError
from ledger_core.models import Account, AccountSnapshot, Event, Operation
from ledger_core.sinks.serialization import to_dict_fast
from ledger_core.store import AccountRegistry, LedgerService
from ledger_core.store.ledger import Amount

logger = logging.getLogger(__name__)

EVENT_SOURCE = "ledger-core"


class EventSink(Protocol):
    """Anything that accepts keyed records per topic."""

    def send(self, topic: str, record: Any, key: str | None = None) -> None: ...

    def close(self) -> None: ...


class BankingService:
    """Account registry and statement ledger behind one interface.

    Parameters
    ----------
    registry : AccountRegistry | None
        Account storage (a fresh registry by default).
    ledger : LedgerService | None
        Statement operations (a fresh ledger by default).
    event_sink : EventSink | None
        When given, receives an ``Event`` for every successful mutation.
    topic_prefix : str
        Prefix of the ``.accounts`` and ``.operations`` topics.
    """

    def __init__(
        self,
        registry: AccountRegistry | None = None,
        ledger: LedgerService | None = None,
        event_sink: EventSink | None = None,
        topic_prefix: str = "dev.ledger",
    ) -> None:
        self.registry = registry if registry is not None else AccountRegistry()
        self.ledger = ledger if ledger is not None else LedgerService()
        self.event_sink = event_sink
        self.accounts_topic = f"{topic_prefix}.accounts"
        self.operations_topic = f"{topic_prefix}.operations"

    @classmethod
    def from_config(cls, config: LedgerConfig, event_sink: EventSink | None = None) -> "BankingService":
        """Build a service; a Kafka sink is created when events are enabled."""
        if event_sink is None and config.publish_events:
            from ledger_core.sinks.kafka import KafkaSink

            event_sink = KafkaSink(config.kafka)

        return cls(event_sink=event_sink, topic_prefix=config.topic_prefix)

    # Accounts

    def create_account(self, external_id: str, display_name: str) -> Account:
        account = self.registry.register(external_id, display_name)
        self._publish(
            self.accounts_topic,
            "account.created",
            account,
            {
                "internal_id": account.internal_id,
                "display_name": account.display_name,
                "created_at": account.created_at,
            },
        )
        return account

    def resolve_account(self, external_id: str) -> Account:
        return self.registry.find(external_id)

    def rename_account(self, account: Account, new_name: str) -> None:
        self.registry.rename(account, new_name)
        self._publish(self.accounts_topic, "account.renamed", account, {"display_name": new_name})

    def get_account_info(self, account: Account) -> AccountSnapshot:
        return self.ledger.account_info(account)

    # Statement

    def deposit(self, account: Account, amount: Amount, description: str | None = None) -> Operation:
        operation = self.ledger.deposit(account, amount, description)
        self._publish_operation(account, operation)
        return operation

    def withdraw(self, account: Account, amount: Amount) -> Operation:
        operation = self.ledger.withdraw(account, amount)
        self._publish_operation(account, operation)
        return operation

    def get_balance(self, account: Account) -> Decimal:
        return self.ledger.compute_balance(account)

    def get_statement(self, account: Account) -> list[Operation]:
        return self.ledger.get_statement(account)

    def get_statement_by_date(self, account: Account, day: date | datetime) -> list[Operation]:
        return self.ledger.get_statement_by_date(account, day)

    def close(self) -> None:
        """Flush and close the event sink, if any."""
        if self.event_sink is not None:
            self.event_sink.close()

    # Events

    def _publish_operation(self, account: Account, operation: Operation) -> None:
        event_type = f"operation.{operation.operation_type.value.lower()}"
        self._publish(self.operations_topic, event_type, account, to_dict_fast(operation))

    def _publish(self, topic: str, event_type: str, account: Account, data: dict) -> None:
        if self.event_sink is None:
            return

        event = Event(
            event_id=self.registry.id_factory(),
            event_type=event_type,
            event_time=self.ledger.clock(),
            source=EVENT_SOURCE,
            subject=account.external_id,
            data=data,
            metadata={"internal_id": account.internal_id},
        )
        # Mutation already committed: sink failures are logged only.
        try:
            self.event_sink.send(topic, event, key=account.external_id)
        except SinkError:
            logger.exception("Failed to publish %s for account %s", event_type, account.external_id)
            return
        logger.debug("Published %s for account %s", event_type, account.external_id)
