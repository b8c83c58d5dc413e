"""Prometheus metrics for the Credit Ledger service.

Business Metrics:
- ledger_accounts_created_total: Accounts opened
- ledger_transactions_total: Transactions by operation type
- ledger_transaction_amount: Signed transaction amounts
- ledger_rejected_requests_total: Requests rejected by domain validation

Technical Metrics:
- ledger_transaction_latency_seconds: Transaction creation latency
- ledger_http_requests_total: HTTP requests by endpoint/status
- ledger_http_request_latency_seconds: HTTP request latency
"""

import time
from contextlib import contextmanager
from decimal import Decimal
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

accounts_created_total = Counter(
    "ledger_accounts_created_total",
    "Total number of accounts created",
)

transactions_total = Counter(
    "ledger_transactions_total",
    "Total number of transactions recorded",
    ["operation_type"],  # in_cash, in_installments, withdraw, payment
)

transaction_amount = Histogram(
    "ledger_transaction_amount",
    "Signed transaction amounts",
    ["direction"],  # debit, credit
    buckets=[10, 50, 100, 250, 500, 1000, 5000, 10000],
)

rejected_requests_total = Counter(
    "ledger_rejected_requests_total",
    "Total number of requests rejected by domain validation",
    ["code"],
)


# =============================================================================
# Technical Metrics
# =============================================================================

transaction_latency = Histogram(
    "ledger_transaction_latency_seconds",
    "Transaction creation latency in seconds",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

http_requests_total = Counter(
    "ledger_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "ledger_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_account_created() -> None:
    """Record a newly created account."""
    accounts_created_total.inc()


def record_transaction(operation_type: str, amount: Decimal) -> None:
    """Record a transaction in metrics."""
    transactions_total.labels(operation_type=operation_type).inc()

    direction = "debit" if amount < 0 else "credit"
    transaction_amount.labels(direction=direction).observe(float(abs(amount)))


def record_rejection(code: str) -> None:
    """Record a request rejected with a domain error code."""
    rejected_requests_total.labels(code=code).inc()


@contextmanager
def track_transaction_latency() -> Generator[None, None, None]:
    """Context manager to track transaction creation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        transaction_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
