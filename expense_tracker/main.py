"""
FastAPI application for the expense tracker.

``create_app`` wires settings, logging, middleware, error handlers and
routers. The expense store is opened in the lifespan and closed on
shutdown, so nothing touches the database at import time.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expense_tracker.core.config import Config, config as default_config
from expense_tracker.core.db.engine import DatabaseSessionManager
from expense_tracker.core.error_handler import register_exception_handlers
from expense_tracker.core.logging_config import setup_logging
from expense_tracker.core.middleware.request_id_middleware import RequestIDMiddleware
from expense_tracker.modules.categories.controller import router as categories_router
from expense_tracker.modules.expenses.controller import router as expenses_router
from expense_tracker.modules.expenses.store import ExpenseStore, SQLAlchemyExpenseStore

logger = logging.getLogger(__name__)


def build_store(settings: Config) -> ExpenseStore:
    sessions = DatabaseSessionManager(settings.db_url, pooled=settings.is_production)
    return SQLAlchemyExpenseStore(sessions, create_tables=settings.auto_create_tables)


def create_app(settings: Optional[Config] = None, store: Optional[ExpenseStore] = None) -> FastAPI:
    settings = settings or default_config
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        expense_store = store or build_store(settings)
        await expense_store.open()
        app.state.expense_store = expense_store
        logger.info("Expense store ready")
        try:
            yield
        finally:
            await expense_store.close()
            logger.info("Expense store closed")

    app = FastAPI(
        title="Expense Tracker API",
        description="Record, list, edit and delete personal expenses",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = settings

    register_exception_handlers(app)

    # Middlewares
    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(expenses_router)
    app.include_router(categories_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
