"""Signals API: listing and analyst claims."""

from fastapi import APIRouter, Body, Depends, HTTPException, status

from trading_journal.schemas.signal import AnalyzeRequest, AnalyzeResponse, SignalRead
from trading_journal.services.errors import SignalAlreadyAnalyzed, SignalNotFound
from trading_journal.services.lifecycle import SignalLifecycle
from trading_journal.services.signal_store import SignalStore
from trading_journal.api.deps import get_lifecycle, get_signal_store

# Largest id a 64-bit integer key can hold
MAX_SIGNAL_ID = 2**63 - 1

router = APIRouter(prefix="/api/signals", tags=["signals"])


def _is_signal_id(raw: str) -> bool:
    if not (raw.isascii() and raw.isdigit()) or len(raw) > len(str(MAX_SIGNAL_ID)):
        return False
    return int(raw) <= MAX_SIGNAL_ID


@router.get("", response_model=list[SignalRead])
def list_signals(store: SignalStore = Depends(get_signal_store)):
    return store.list_all()


@router.get("/pending", response_model=list[SignalRead])
def list_pending_signals(store: SignalStore = Depends(get_signal_store)):
    return store.list_pending()


@router.post("/{signal_id}/analyze", response_model=AnalyzeResponse)
def analyze_signal(
    signal_id: str,
    body: AnalyzeRequest | None = Body(default=None),
    lifecycle: SignalLifecycle = Depends(get_lifecycle),
):
    user_name = body.user_name if body else None
    try:
        if not _is_signal_id(signal_id):
            raise SignalNotFound(signal_id)
        result = lifecycle.analyze(int(signal_id), user_name)
    except SignalNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Signal not found")
    except SignalAlreadyAnalyzed:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Signal already analyzed")

    return AnalyzeResponse(
        signal=SignalRead.model_validate(result.signal),
        response_time_seconds=result.response_time_seconds,
    )
