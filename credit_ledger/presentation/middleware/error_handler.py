"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from credit_ledger.core.metrics import record_rejection
from credit_ledger.domain.exceptions import (
    AccountNotFoundException,
    DomainException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, exc: DomainException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(AccountNotFoundException)
    async def account_not_found_handler(
        request: Request,
        exc: AccountNotFoundException,
    ) -> JSONResponse:
        """Handle account not found errors."""
        record_rejection(exc.code)
        return _error_response(404, exc)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle validation failures raised by the services."""
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
        )
        record_rejection(exc.code)
        return _error_response(400, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
