"""Shared API dependencies.

The stores and the lifecycle engine are built once per application in
``create_app`` and handed to routes from ``app.state``.
"""

from fastapi import Request

from trading_journal.config import Settings
from trading_journal.services.lifecycle import SignalLifecycle
from trading_journal.services.signal_store import SignalStore
from trading_journal.services.trade_store import TradeStore
from trading_journal.utils.clock import Clock


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_signal_store(request: Request) -> SignalStore:
    return request.app.state.signal_store


def get_trade_store(request: Request) -> TradeStore:
    return request.app.state.trade_store


def get_lifecycle(request: Request) -> SignalLifecycle:
    return request.app.state.lifecycle
