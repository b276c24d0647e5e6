"""Pydantic schemas for Signal API."""

from datetime import datetime

from pydantic import BaseModel, computed_field

from trading_journal.models.signal import SignalAction, SignalStatus


class SignalRead(BaseModel):
    id: int
    ticker: str
    action: SignalAction
    price: float
    event_timestamp: datetime
    received_at: datetime
    status: SignalStatus
    analyzed_by: str | None
    analyzed_at: datetime | None
    response_time_seconds: float | None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def analyzed(self) -> bool:
        return self.status == SignalStatus.ANALYZED


class IngestResponse(BaseModel):
    success: bool = True
    message: str = "Signal received and processed"
    signal_id: int


class AnalyzeRequest(BaseModel):
    user_name: str | None = None


class AnalyzeResponse(BaseModel):
    success: bool = True
    signal: SignalRead
    response_time_seconds: float
