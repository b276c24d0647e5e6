"""Trade journal API."""

import logging

from fastapi import APIRouter, Depends

from trading_journal.models.trade import Trade
from trading_journal.schemas.trade import TradeCreate, TradeCreateResponse, TradeRead
from trading_journal.services.trade_store import TradeStore
from trading_journal.api.deps import get_trade_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/trades", tags=["trades"])


@router.get("", response_model=list[TradeRead])
def list_trades(store: TradeStore = Depends(get_trade_store)):
    return store.list_all()


@router.post("", response_model=TradeCreateResponse)
def create_trade(body: TradeCreate, store: TradeStore = Depends(get_trade_store)):
    trade = store.insert(Trade(**body.model_dump()))
    logger.info(
        f"[trade_{trade.id}] {trade.created_by} logged {trade.direction.value} "
        f"{trade.pair or '-'} (signal {trade.signal_id})"
    )
    return TradeCreateResponse(trade=TradeRead.model_validate(trade))
