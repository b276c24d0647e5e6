"""Tests for the signal and trade stores."""

from datetime import datetime, timezone

import pytest

from trading_journal.models.signal import Signal, SignalStatus
from trading_journal.models.trade import Trade, TradeDirection, TradeResult

T0 = datetime(2024, 3, 1, 9, 30, 0, 123456, tzinfo=timezone.utc)


def _signal(ticker: str) -> Signal:
    return Signal(ticker=ticker, event_timestamp=T0, received_at=T0)


class TestSignalStore:
    def test_list_all_newest_first(self, signal_store):
        for ticker in ("EURUSD", "GBPUSD", "USDJPY"):
            signal_store.insert(_signal(ticker))

        assert [s.ticker for s in signal_store.list_all()] == ["USDJPY", "GBPUSD", "EURUSD"]

    def test_find_by_id(self, signal_store):
        inserted = signal_store.insert(_signal("EURUSD"))

        found = signal_store.find_by_id(inserted.id)
        assert found.id == inserted.id
        assert found.ticker == "EURUSD"
        assert signal_store.find_by_id(inserted.id + 100) is None

    def test_timestamps_round_trip_as_aware_utc(self, signal_store):
        inserted = signal_store.insert(_signal("EURUSD"))
        found = signal_store.find_by_id(inserted.id)

        assert found.received_at == T0
        assert found.received_at.tzinfo is not None

    def test_list_pending_preserves_order(self, signal_store):
        a = signal_store.insert(_signal("A"))
        b = signal_store.insert(_signal("B"))
        c = signal_store.insert(_signal("C"))

        b.status = SignalStatus.ANALYZED
        b.analyzed_by = "Alice"
        b.analyzed_at = T0
        b.response_time_seconds = 0.0
        signal_store.save(b)

        assert [s.id for s in signal_store.list_pending()] == [c.id, a.id]
        assert signal_store.count() == 3

    def test_save_requires_stored_signal(self, signal_store):
        with pytest.raises(ValueError):
            signal_store.save(_signal("EURUSD"))


class TestTradeStore:
    def test_insert_assigns_id_and_timestamps(self, trade_store, clock):
        trade = trade_store.insert(Trade(direction=TradeDirection.LONG, entry_price=1.08))

        assert trade.id is not None
        assert trade.created_at == clock.now()
        assert trade.updated_at == clock.now()
        assert trade.result is TradeResult.PENDING
        assert trade.created_by == "Anonymous"
        assert trade.pips == 0.0

    def test_dangling_signal_reference_is_kept(self, trade_store):
        trade = trade_store.insert(Trade(direction=TradeDirection.SHORT, signal_id=4242))
        assert trade_store.list_all()[0].signal_id == 4242

    def test_list_all_newest_first(self, trade_store, clock):
        first = trade_store.insert(Trade(direction=TradeDirection.LONG, pair="EURUSD"))
        clock.advance(5)
        second = trade_store.insert(Trade(direction=TradeDirection.SHORT, pair="GBPUSD"))

        assert [t.id for t in trade_store.list_all()] == [second.id, first.id]
        assert trade_store.count() == 2
