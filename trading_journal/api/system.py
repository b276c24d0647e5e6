"""System API: health check and the manual test webhook."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from trading_journal.config import Settings
from trading_journal.services.lifecycle import SignalLifecycle
from trading_journal.services.signal_store import SignalStore
from trading_journal.services.trade_store import TradeStore
from trading_journal.utils.clock import Clock
from trading_journal.utils.constants import TEST_SIGNAL
from trading_journal.api.deps import (
    get_clock,
    get_lifecycle,
    get_settings,
    get_signal_store,
    get_trade_store,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/health")
def health_check(
    signals: SignalStore = Depends(get_signal_store),
    trades: TradeStore = Depends(get_trade_store),
    clock: Clock = Depends(get_clock),
):
    return {
        "status": "healthy",
        "timestamp": clock.now(),
        "signals_count": signals.count(),
        "trades_count": trades.count(),
    }


@router.post("/test-webhook")
def test_webhook(
    lifecycle: SignalLifecycle = Depends(get_lifecycle),
    settings: Settings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
):
    """Push a canned EURUSD signal through ingestion, bypassing the secret check."""
    if not settings.enable_test_webhook:
        raise HTTPException(status_code=404, detail="Not Found")

    logger.info("Test webhook called")
    payload = {**TEST_SIGNAL, "timestamp": clock.now().isoformat()}
    signal = lifecycle.ingest(payload, payload["auth_token"])
    return {"message": "Test signal sent", "signal": payload, "signal_id": signal.id}
