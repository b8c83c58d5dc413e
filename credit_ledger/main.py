"""
Credit Ledger - Main Application Entry Point

An account & transaction service that tracks each account's
available credit limit as purchases, withdrawals and payments
are recorded against it.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from credit_ledger import __version__
from credit_ledger.core.config import settings
from credit_ledger.core.logging import setup_logging
from credit_ledger.core.metrics import get_metrics, get_metrics_content_type
from credit_ledger.infrastructure.database import db_manager
from credit_ledger.presentation.api import api_router
from credit_ledger.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Initialize database connection pool and schema
    - Clean up on shutdown
    """
    setup_logging()
    db_manager.init()
    await db_manager.create_tables()

    logger = structlog.get_logger(__name__)
    logger.info("application_started", version=__version__)

    yield

    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title="Credit Ledger",
    description="Account & Transaction Service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "credit_ledger.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
