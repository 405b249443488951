"""
FastAPI Application Entry Point - Order Management Service
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from oms import __version__
from oms.config import settings
from oms.database import SessionLocal, init_db
from oms.errors import OrderManagementError, UnauthorizedError
from oms.observability import get_logger, setup_observability
from oms.schemas.common import ErrorResponse
from oms.api import auth, customers, health, notifications, orders, products, stats
from oms.seed import seed_sample_data

logger = get_logger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Order Management Service",
    description="Products, customers, orders, notifications and dashboard stats",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(products.router)
app.include_router(customers.router)
app.include_router(orders.router)
app.include_router(notifications.router)
app.include_router(stats.router)

# Logging and Prometheus metrics
setup_observability(app)


def _error_response(status_code: int, message: str, code: str, headers: dict = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, code=code).model_dump(by_alias=True),
        headers=headers
    )


@app.exception_handler(OrderManagementError)
async def order_management_error_handler(request: Request, exc: OrderManagementError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return _error_response(exc.status_code, exc.message, exc.code, headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    return _error_response(status.HTTP_400_BAD_REQUEST, message, "ValidationError")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(exc.status_code, "Endpoint not found", "NotFound")
    return _error_response(exc.status_code, str(exc.detail), "HTTPError", getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("unhandled_error", path=request.url.path, method=request.method, exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong!", "InternalError")


@app.on_event("startup")
def startup_event():
    """Initialize database on startup"""
    logger.info("service_starting", service=settings.SERVICE_NAME)
    init_db()
    if settings.SEED_SAMPLE_DATA:
        db = SessionLocal()
        try:
            seed_sample_data(db)
        finally:
            db.close()
    logger.info(
        "service_started",
        service=settings.SERVICE_NAME,
        port=settings.SERVICE_PORT,
        events_enabled=settings.EVENTS_ENABLED
    )


@app.on_event("shutdown")
def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("service_stopping", service=settings.SERVICE_NAME)
