"""Signal lifecycle engine.

A signal is created pending by ``ingest`` and moved to analyzed exactly once
by ``analyze``, which stamps the analyst and the response time. There is no
other transition.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from trading_journal.models.signal import Signal, SignalStatus
from trading_journal.services.errors import (
    AuthenticationRequired,
    SignalAlreadyAnalyzed,
    SignalNotFound,
)
from trading_journal.services.signal_store import SignalStore
from trading_journal.utils.clock import Clock, SystemClock, response_time_seconds
from trading_journal.utils.parsing import (
    parse_action,
    parse_credential,
    parse_float,
    parse_identity,
    parse_ticker,
    parse_timestamp,
)

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    signal: Signal
    response_time_seconds: float


class SignalLifecycle:
    def __init__(self, store: SignalStore, clock: Clock | None = None):
        self.store = store
        self.clock = clock or SystemClock()

    def ingest(self, payload: Mapping[str, Any], credential: Any) -> Signal:
        """Normalize an inbound payload and store it as a pending signal.

        Raises AuthenticationRequired when no credential was presented; in that
        case nothing is stored. Missing or malformed optional fields fall back
        to their defaults rather than failing the request.
        """
        if parse_credential(credential) is None:
            raise AuthenticationRequired()

        received_at = self.clock.now()
        signal = Signal(
            ticker=parse_ticker(payload.get("ticker")),
            action=parse_action(payload.get("action")),
            price=parse_float(payload.get("price")),
            event_timestamp=parse_timestamp(payload.get("timestamp"), default=received_at),
            received_at=received_at,
            status=SignalStatus.PENDING,
        )
        self.store.insert(signal)
        logger.info(
            f"[signal_{signal.id}] Received {signal.ticker} {signal.action.value} @ {signal.price}"
        )
        return signal

    def analyze(self, signal_id: int, analyst: Any = None) -> AnalysisResult:
        """Claim a pending signal for ``analyst`` and stamp its response time."""
        analyzed_by = parse_identity(analyst)

        # Lookup, check and update form one unit so two analysts can't both win
        with self.store.lock:
            signal = self.store.find_by_id(signal_id)
            if signal is None:
                raise SignalNotFound(signal_id)
            if signal.status == SignalStatus.ANALYZED:
                raise SignalAlreadyAnalyzed(signal_id, signal.analyzed_by)

            analyzed_at = self.clock.now()
            elapsed = response_time_seconds(signal.received_at, analyzed_at)

            signal.status = SignalStatus.ANALYZED
            signal.analyzed_by = analyzed_by
            signal.analyzed_at = analyzed_at
            signal.response_time_seconds = elapsed
            self.store.save(signal)

        logger.info(f"[signal_{signal.id}] Analyzed by {analyzed_by} in {elapsed:.3f}s")
        return AnalysisResult(signal=signal, response_time_seconds=elapsed)
