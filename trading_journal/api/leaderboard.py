"""Leaderboard API: analysts ranked by average response time."""

from fastapi import APIRouter, Depends

from trading_journal.schemas.leaderboard import LeaderboardEntry
from trading_journal.services.leaderboard import build_leaderboard
from trading_journal.services.signal_store import SignalStore
from trading_journal.api.deps import get_signal_store

router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


@router.get("", response_model=list[LeaderboardEntry])
def leaderboard(store: SignalStore = Depends(get_signal_store)):
    return build_leaderboard(store.list_all())
