"""Trade model: manually entered execution record."""

from datetime import datetime
from enum import Enum

from sqlmodel import SQLModel, Field, Column

from trading_journal.database import UTCDateTime
from trading_journal.utils.constants import ANONYMOUS


class TradeDirection(str, Enum):
    LONG = "long"
    SHORT = "short"


class TradeResult(str, Enum):
    WIN = "win"
    LOSS = "loss"
    PENDING = "pending"


class Trade(SQLModel, table=True):
    __tablename__ = "trade"

    id: int | None = Field(default=None, primary_key=True)
    # Weak reference by id only: no foreign key, dangling ids are kept as-is
    signal_id: int | None = Field(default=None, index=True)
    pair: str | None = None
    direction: TradeDirection
    entry_price: float | None = None
    exit_price: float | None = None
    stop_loss: float | None = None
    take_profit: float | None = None
    reasoning: str = ""
    voice_note_url: str | None = None
    screenshot_url: str | None = None
    result: TradeResult = TradeResult.PENDING
    pips: float = 0.0
    created_by: str = ANONYMOUS
    created_at: datetime | None = Field(default=None, sa_column=Column(UTCDateTime(), nullable=False))
    updated_at: datetime | None = Field(default=None, sa_column=Column(UTCDateTime(), nullable=False))
