"""
Logging and metrics setup
"""
import logging

import structlog
from fastapi import FastAPI
from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator

from oms.config import settings

# Business Metrics
oms_orders_placed_total = Counter(
    "oms_orders_placed_total",
    "Total orders placed successfully"
)

oms_orders_rejected_total = Counter(
    "oms_orders_rejected_total",
    "Total order placements rejected",
    ["reason"]  # Labels: 'ProductNotFound', 'InsufficientStock', ...
)

oms_low_stock_alerts_total = Counter(
    "oms_low_stock_alerts_total",
    "Total low stock alerts raised by order placement"
)


def configure_logging(level: str = settings.LOG_LEVEL):
    """Configure structlog for JSON output"""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_metrics(app: FastAPI):
    # Tracks HTTP request latency and status codes, exposed at /metrics
    Instrumentator().instrument(app).expose(app)


def setup_observability(app: FastAPI):
    """
    Bootstraps logging and metrics for the FastAPI app.
    Call this once in main.py before starting the server.
    """
    configure_logging()
    configure_metrics(app)


def get_logger(name: str):
    return structlog.get_logger(name)
