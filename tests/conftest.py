"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from itertools import count

import pytest

from ledger_core.service import BankingService
from ledger_core.store import AccountRegistry, LedgerService


class FakeClock:
    """Controllable clock; returns ``now`` until advanced."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at 2024-03-10 09:30."""
    return FakeClock(datetime(2024, 3, 10, 9, 30))


@pytest.fixture
def id_factory():
    """Sequential internal ids: id-0001, id-0002, ..."""
    counter = count(1)
    return lambda: f"id-{next(counter):04d}"


@pytest.fixture
def registry(clock: FakeClock, id_factory) -> AccountRegistry:
    """Create a fresh registry for each test."""
    return AccountRegistry(id_factory=id_factory, clock=clock)


@pytest.fixture
def ledger(clock: FakeClock) -> LedgerService:
    """Create a fresh ledger for each test."""
    return LedgerService(clock=clock)


@pytest.fixture
def service(registry: AccountRegistry, ledger: LedgerService) -> BankingService:
    """Service wired to the fake clock and sequential ids."""
    return BankingService(registry=registry, ledger=ledger)


@pytest.fixture
def sample_cpf() -> str:
    """Sample formatted CPF."""
    return "529.982.247-25"
