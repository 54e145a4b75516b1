"""Tests for AccountRegistry."""

from datetime import datetime

import pytest

from ledger_core.exceptions import AccountNotFoundError, DuplicateAccountError
from ledger_core.generators.pool import UUIDPool
from ledger_core.store import AccountRegistry, LedgerService


class TestRegister:
    """Tests for account registration."""

    def test_register_creates_empty_account(self, registry: AccountRegistry, sample_cpf: str) -> None:
        account = registry.register(sample_cpf, "Alice")

        assert account.external_id == sample_cpf
        assert account.display_name == "Alice"
        assert account.internal_id == "id-0001"
        assert account.created_at == datetime(2024, 3, 10, 9, 30)
        assert account.statement == []

    def test_register_duplicate_fails(self, registry: AccountRegistry) -> None:
        registry.register("111", "Alice")

        with pytest.raises(DuplicateAccountError, match="111") as exc_info:
            registry.register("111", "Bob")

        assert exc_info.value.external_id == "111"
        assert registry.find("111").display_name == "Alice"
        assert len(registry) == 1

    def test_each_account_gets_its_own_internal_id(self, registry: AccountRegistry) -> None:
        first = registry.register("111", "Alice")
        second = registry.register("222", "Bob")

        assert first.internal_id != second.internal_id

    def test_default_id_factory_generates_uuids(self) -> None:
        registry = AccountRegistry()
        account = registry.register("111", "Alice")

        assert isinstance(registry.id_factory, UUIDPool)
        assert len(account.internal_id) == 36
        assert account.internal_id[14] == "4"  # version nibble

    def test_failed_registration_consumes_no_id(self, registry: AccountRegistry) -> None:
        registry.register("111", "Alice")
        with pytest.raises(DuplicateAccountError):
            registry.register("111", "Bob")

        assert registry.register("222", "Carl").internal_id == "id-0002"


class TestFind:
    """Tests for account lookup."""

    def test_find_returns_same_instance(self, registry: AccountRegistry) -> None:
        account = registry.register("111", "Alice")

        assert registry.find("111") is account

    def test_find_missing_fails(self, registry: AccountRegistry) -> None:
        with pytest.raises(AccountNotFoundError, match="Customer 999 not found") as exc_info:
            registry.find("999")

        assert exc_info.value.external_id == "999"

    def test_mutation_visible_to_later_lookup(self, registry: AccountRegistry) -> None:
        ledger = LedgerService()
        ledger.deposit(registry.register("111", "Alice"), 10)

        assert ledger.compute_balance(registry.find("111")) == 10

    def test_exists(self, registry: AccountRegistry) -> None:
        registry.register("111", "Alice")

        assert registry.exists("111")
        assert not registry.exists("222")
        assert "111" in registry
        assert "222" not in registry


class TestRename:
    """Tests for renaming accounts."""

    def test_rename_in_place(self, registry: AccountRegistry) -> None:
        account = registry.register("111", "Alice")
        internal_id = account.internal_id

        registry.rename(account, "Alice Souza")

        assert registry.find("111").display_name == "Alice Souza"
        assert account.internal_id == internal_id
        assert account.external_id == "111"
        assert account.statement == []


class TestListing:
    """Tests for iteration and summary."""

    def test_accounts_in_registration_order(self, registry: AccountRegistry) -> None:
        for cpf in ("333", "111", "222"):
            registry.register(cpf, f"Customer {cpf}")

        assert [a.external_id for a in registry] == ["333", "111", "222"]
        assert len(registry.accounts()) == 3

    def test_summary(self, registry: AccountRegistry) -> None:
        assert registry.summary() == {"accounts": 0, "operations": 0}

        registry.register("111", "Alice")
        registry.register("222", "Bob")

        assert registry.summary() == {"accounts": 2, "operations": 0}
