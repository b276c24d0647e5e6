"""Response-time leaderboard.

Recomputed from the full signal list on every call; there is no cache.
Analysts are grouped by their raw identity string, so "alice" and "Alice "
are separate rows.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from trading_journal.models.signal import Signal, SignalStatus


@dataclass
class LeaderboardRow:
    user: str
    total_signals: int
    total_response_time: float
    fastest_response: float
    slowest_response: float
    average_response_time: float


def build_leaderboard(signals: Iterable[Signal]) -> list[LeaderboardRow]:
    """Per-analyst response statistics, fastest average first.

    Equal averages are ordered by identity ascending.
    """
    times_by_user: dict[str, list[float]] = {}
    for signal in signals:
        if signal.status != SignalStatus.ANALYZED or signal.response_time_seconds is None:
            continue
        times_by_user.setdefault(signal.analyzed_by, []).append(signal.response_time_seconds)

    rows = []
    for user, times in times_by_user.items():
        total = sum(times)
        rows.append(
            LeaderboardRow(
                user=user,
                total_signals=len(times),
                total_response_time=total,
                fastest_response=min(times),
                slowest_response=max(times),
                average_response_time=total / len(times),
            )
        )

    rows.sort(key=lambda row: (row.average_response_time, row.user))
    return rows
