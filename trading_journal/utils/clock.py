"""Time source for arrival and analysis stamps."""

import logging
from datetime import datetime, timezone
from typing import Protocol

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock in aware UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def response_time_seconds(received_at: datetime, analyzed_at: datetime) -> float:
    """Elapsed seconds between arrival and analysis, sub-second precision kept.

    Never negative: a clock stepping backwards yields 0.0.
    """
    elapsed = (analyzed_at - received_at).total_seconds()
    if elapsed < 0:
        logger.warning(
            f"Clock went backwards (received_at={received_at.isoformat()}, "
            f"analyzed_at={analyzed_at.isoformat()}); clamping response time to 0"
        )
        return 0.0
    return elapsed
