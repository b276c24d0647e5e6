"""Database models."""

from trading_journal.models.signal import Signal, SignalAction, SignalStatus
from trading_journal.models.trade import Trade, TradeDirection, TradeResult

__all__ = [
    "Signal",
    "SignalAction",
    "SignalStatus",
    "Trade",
    "TradeDirection",
    "TradeResult",
]
