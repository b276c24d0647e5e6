"""Trade store: newest-first collection of trade records."""

from sqlmodel import select, func

from trading_journal.database import SessionStore
from trading_journal.models.trade import Trade
from trading_journal.utils.clock import Clock, SystemClock


class TradeStore(SessionStore):
    """Trades are only ever appended; ``signal_id`` is not checked against signals."""

    def __init__(self, bind, lock=None, clock: Clock | None = None):
        super().__init__(bind, lock)
        self._clock = clock or SystemClock()

    def insert(self, trade: Trade) -> Trade:
        now = self._clock.now()
        trade.id = None
        trade.created_at = now
        trade.updated_at = now
        with self.lock, self._session() as session:
            session.add(trade)
            session.commit()
            session.refresh(trade)
        return trade

    def list_all(self) -> list[Trade]:
        with self.lock, self._session() as session:
            return list(session.exec(select(Trade).order_by(Trade.id.desc())).all())

    def count(self) -> int:
        with self.lock, self._session() as session:
            return session.exec(select(func.count()).select_from(Trade)).one()
