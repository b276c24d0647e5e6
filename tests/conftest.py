"""Shared fixtures: a fresh in-memory database and a hand-driven clock per test."""

import threading
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from trading_journal.config import Settings
from trading_journal.database import create_db_and_tables, make_engine
from trading_journal.main import create_app
from trading_journal.services.lifecycle import SignalLifecycle
from trading_journal.services.signal_store import SignalStore
from trading_journal.services.trade_store import TradeStore

START = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = START):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> datetime:
        self.current = self.current + timedelta(seconds=seconds)
        return self.current


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def engine():
    bind = make_engine("sqlite://")
    create_db_and_tables(bind)
    yield bind
    bind.dispose()


@pytest.fixture
def lock():
    return threading.RLock()


@pytest.fixture
def signal_store(engine, lock) -> SignalStore:
    return SignalStore(engine, lock)


@pytest.fixture
def trade_store(engine, lock, clock) -> TradeStore:
    return TradeStore(engine, lock, clock=clock)


@pytest.fixture
def lifecycle(signal_store, clock) -> SignalLifecycle:
    return SignalLifecycle(signal_store, clock=clock)


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    return Settings(database_url="sqlite://", static_dir=tmp_path / "no-dashboard")


@pytest.fixture
def client(app_settings, engine, clock):
    app = create_app(settings=app_settings, engine=engine, clock=clock)
    with TestClient(app) as test_client:
        yield test_client
