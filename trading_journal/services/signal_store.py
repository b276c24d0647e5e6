"""Signal store: newest-first collection of signals keyed by id."""

from sqlmodel import select, func

from trading_journal.database import SessionStore
from trading_journal.models.signal import Signal, SignalStatus


class SignalStore(SessionStore):
    """Signals ordered newest-first. There is no delete."""

    def insert(self, signal: Signal) -> Signal:
        with self.lock, self._session() as session:
            session.add(signal)
            session.commit()
            session.refresh(signal)
        return signal

    def find_by_id(self, signal_id: int) -> Signal | None:
        with self.lock, self._session() as session:
            return session.get(Signal, signal_id)

    def save(self, signal: Signal) -> Signal:
        """Persist in-place changes to a signal that is already stored."""
        if signal.id is None:
            raise ValueError("Cannot save a signal that was never inserted")
        with self.lock, self._session() as session:
            session.add(signal)
            session.commit()
            session.refresh(signal)
        return signal

    def list_all(self) -> list[Signal]:
        with self.lock, self._session() as session:
            return list(session.exec(select(Signal).order_by(Signal.id.desc())).all())

    def list_pending(self) -> list[Signal]:
        stmt = (
            select(Signal)
            .where(Signal.status == SignalStatus.PENDING)
            .order_by(Signal.id.desc())
        )
        with self.lock, self._session() as session:
            return list(session.exec(stmt).all())

    def count(self) -> int:
        with self.lock, self._session() as session:
            return session.exec(select(func.count()).select_from(Signal)).one()
