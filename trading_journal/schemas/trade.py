"""Pydantic schemas for Trade API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from trading_journal.models.trade import TradeDirection, TradeResult
from trading_journal.utils.constants import ANONYMOUS
from trading_journal.utils.parsing import parse_float, parse_optional_float


class TradeCreate(BaseModel):
    signal_id: int | None = Field(default=None, ge=-(2**63), le=2**63 - 1)
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

    @field_validator("entry_price", "exit_price", "stop_loss", "take_profit", mode="before")
    @classmethod
    def _lenient_price(cls, value: Any) -> float | None:
        return parse_optional_float(value)

    @field_validator("pips", mode="before")
    @classmethod
    def _lenient_pips(cls, value: Any) -> float:
        return parse_float(value)

    @field_validator("direction", "result", mode="before")
    @classmethod
    def _lower_enum(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("created_by", mode="before")
    @classmethod
    def _default_author(cls, value: Any) -> str:
        if value is None or not str(value).strip():
            return ANONYMOUS
        return str(value)

    @field_validator("reasoning", mode="before")
    @classmethod
    def _blank_reasoning(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("signal_id", mode="before")
    @classmethod
    def _blank_signal_id(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class TradeRead(BaseModel):
    id: int
    signal_id: int | None
    pair: str | None
    direction: TradeDirection
    entry_price: float | None
    exit_price: float | None
    stop_loss: float | None
    take_profit: float | None
    reasoning: str
    voice_note_url: str | None
    screenshot_url: str | None
    result: TradeResult
    pips: float
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TradeCreateResponse(BaseModel):
    success: bool = True
    trade: TradeRead
