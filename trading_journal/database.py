"""SQLModel engine setup and the locked session base shared by the stores."""

import threading
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel, create_engine, Session


class UTCDateTime(TypeDecorator):
    """Stores aware datetimes as naive UTC and hands them back as aware UTC."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    def process_result_value(self, value: datetime | None, dialect):
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)


def make_engine(database_url: str) -> Engine:
    connect_args = {}
    kwargs = {}
    # SQLite needs check_same_thread=False; PostgreSQL does not
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        # In-memory SQLite lives as long as its connection, so keep exactly one
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    return create_engine(
        database_url,
        echo=False,
        connect_args=connect_args,
        **kwargs,
    )


def create_db_and_tables(bind: Engine):
    """Create all tables. Called when the app is built."""
    # Table models must be imported so they register on the metadata
    import trading_journal.models  # noqa: F401

    SQLModel.metadata.create_all(bind)


class SessionStore:
    """Base for the stores: one engine, one re-entrant lock serialising all access.

    Stores of the same application share the lock, so every operation sees a
    consistent snapshot and a single SQLite connection is never used from two
    threads at once.
    """

    def __init__(self, bind: Engine, lock=None):
        self._engine = bind
        self.lock = lock or threading.RLock()

    def _session(self) -> Session:
        # Returned entities stay readable after the session closes
        return Session(self._engine, expire_on_commit=False)
