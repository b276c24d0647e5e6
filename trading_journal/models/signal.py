"""Signal model: one alert from the external signal source."""

from datetime import datetime
from enum import Enum

from sqlmodel import SQLModel, Field, Column

from trading_journal.database import UTCDateTime
from trading_journal.utils.constants import DEFAULT_TICKER


class SignalAction(str, Enum):
    BUY = "buy"
    SELL = "sell"


class SignalStatus(str, Enum):
    PENDING = "pending"
    ANALYZED = "analyzed"  # terminal


class Signal(SQLModel, table=True):
    """A trading alert awaiting or having received analysis.

    ``analyzed_by``, ``analyzed_at`` and ``response_time_seconds`` are all set
    together at the pending -> analyzed transition and are null before it.
    """

    __tablename__ = "signal"

    id: int | None = Field(default=None, primary_key=True)
    ticker: str = Field(default=DEFAULT_TICKER, index=True)
    action: SignalAction = SignalAction.BUY
    price: float = 0.0
    event_timestamp: datetime = Field(sa_column=Column(UTCDateTime(), nullable=False))
    received_at: datetime = Field(sa_column=Column(UTCDateTime(), nullable=False))
    status: SignalStatus = Field(default=SignalStatus.PENDING, index=True)
    analyzed_by: str | None = None
    analyzed_at: datetime | None = Field(default=None, sa_column=Column(UTCDateTime()))
    response_time_seconds: float | None = None
