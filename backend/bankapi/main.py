"""Bank Accounts API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BankAccountsError → structured JSON responses
    - CORS configured from settings (not hardcoded), alert headers exposed
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bankapi.api.error_handlers import register_error_handlers
from bankapi.core.header_util import alert_header_names
from bankapi.infrastructure.database import init_db, close_db
from bankapi.infrastructure.observability import setup_logging
from bankapi.config import get_settings
from bankapi.api.routes import bank_accounts, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Bank Accounts API started")
    yield
    await close_db()
    logger.info("Bank Accounts API shutting down")


app = FastAPI(
    title="Bank Accounts API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", *alert_header_names(settings.client_app_name)],
)

app.include_router(health.router)
app.include_router(bank_accounts.router)

register_error_handlers(app)


def run(host: str = "0.0.0.0", port: int = 8080, reload: bool = False) -> None:
    """Run the API with uvicorn (console script: bank-accounts-api)."""
    uvicorn.run("bankapi.main:app", host=host, port=port, reload=reload)
