"""FastAPI application entry point."""

import logging
import threading
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from trading_journal.config import Settings, settings as default_settings
from trading_journal.database import create_db_and_tables, make_engine
from trading_journal.services.lifecycle import SignalLifecycle
from trading_journal.services.signal_store import SignalStore
from trading_journal.services.trade_store import TradeStore
from trading_journal.utils.clock import Clock, SystemClock
from trading_journal.utils.logging import setup_logging
from trading_journal.api import leaderboard, signals, system, trades, webhook

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    cfg: Settings = app.state.settings
    setup_logging(cfg.log_level)
    base_url = f"http://localhost:{cfg.port}"
    logger.info(f"Trading Journal running on port {cfg.port}")
    logger.info(f"Webhook URL: {base_url}/webhook/tradingview")
    if app.state.dashboard_enabled:
        logger.info(f"Dashboard: {base_url}")

    yield

    logger.info(
        f"Shutting down with {app.state.signal_store.count()} signals and "
        f"{app.state.trade_store.count()} trades in memory"
    )


def create_app(
    settings: Settings | None = None,
    engine: Engine | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    """Build an app with its own stores.

    Both stores share one lock so every request sees a consistent snapshot.
    """
    cfg = settings or default_settings
    bind = engine or make_engine(cfg.database_url)
    create_db_and_tables(bind)

    clock = clock or SystemClock()
    lock = threading.RLock()
    signal_store = SignalStore(bind, lock)
    trade_store = TradeStore(bind, lock, clock=clock)

    app = FastAPI(
        title="Trading Journal",
        description="TradingView signal journal with analyst response-time leaderboard",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.clock = clock
    app.state.signal_store = signal_store
    app.state.trade_store = trade_store
    app.state.lifecycle = SignalLifecycle(signal_store, clock=clock)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount routers
    app.include_router(webhook.router)
    app.include_router(signals.router)
    app.include_router(trades.router)
    app.include_router(leaderboard.router)
    app.include_router(system.router)

    # Serve the dashboard when one is deployed (must be after all API routers)
    static_dir = cfg.static_dir
    app.state.dashboard_enabled = (static_dir / "index.html").is_file()
    if app.state.dashboard_enabled:
        from fastapi.staticfiles import StaticFiles

        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="dashboard")

    return app


app = create_app()
