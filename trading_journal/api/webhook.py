"""Webhook API: signal ingestion from TradingView."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from trading_journal.config import Settings
from trading_journal.schemas.signal import IngestResponse
from trading_journal.services.auth import verify_webhook_token
from trading_journal.services.errors import AuthenticationRequired, InvalidCredential
from trading_journal.services.lifecycle import SignalLifecycle
from trading_journal.utils.parsing import parse_credential
from trading_journal.api.deps import get_lifecycle, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook", tags=["webhook"])


@router.post("/tradingview", response_model=IngestResponse)
def tradingview_webhook(
    payload: dict[str, Any] | None = Body(default=None),
    lifecycle: SignalLifecycle = Depends(get_lifecycle),
    settings: Settings = Depends(get_settings),
):
    """Store an alert as a pending signal. TradingView gives up after 3s, so no extra work here."""
    payload = payload or {}
    token = payload.get("auth_token")
    logger.info(f"Webhook received: ticker={payload.get('ticker')!r} action={payload.get('action')!r}")

    try:
        # Presence is checked by ingest; only a presented token is compared
        presented = parse_credential(token)
        if presented is not None:
            verify_webhook_token(presented, settings.webhook_secret)
        signal = lifecycle.ingest(payload, token)
    except (AuthenticationRequired, InvalidCredential) as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except Exception as e:
        logger.error(f"Webhook error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    return IngestResponse(signal_id=signal.id)
