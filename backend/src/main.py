# pyright: reportMissingTypeStubs=false
"""
Provider Scheduling Backend API

A FastAPI application where users book hour-slot appointments with
service providers.

Features:
- Appointment booking and cancellation rules
- Provider directory
- Provider notifications on new bookings
- PostgreSQL database with SQLAlchemy ORM
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import appointments, notifications, providers
from core.config import NOTIFICATION_LOCALE
from core.constants import CORS_ORIGINS
from core.exceptions import BookingError
from services.notification_formatter import NotificationFormatter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info("🚀 Starting Provider Scheduling API")

    # Fail at startup rather than on the first booking
    NotificationFormatter(NOTIFICATION_LOCALE)
    logger.info(f"✅ Notification locale: {NOTIFICATION_LOCALE}")

    yield

    logger.info("🛑 Shutting down Provider Scheduling API")


# Create FastAPI application
app = FastAPI(
    title="Provider Scheduling Backend",
    description="Hour-slot appointment booking with service providers",
    version="1.0.0",
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc",  # ReDoc
    lifespan=lifespan,
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(
    appointments.router,
    tags=["appointments"],
    responses={
        400: {"description": "Validation or booking rule failure"},
        401: {"description": "Unauthorized"},
        404: {"description": "Resource not found"},
        500: {"description": "Internal server error"},
    },
)
app.include_router(
    providers.router,
    tags=["providers"],
    responses={
        401: {"description": "Unauthorized"},
        500: {"description": "Internal server error"},
    },
)
app.include_router(
    notifications.router,
    tags=["notifications"],
    responses={
        401: {"description": "Unauthorized"},
        500: {"description": "Internal server error"},
    },
)


@app.get(
    "/health",
    summary="Health check",
    description="Returns the health status of the API",
)
async def health_check() -> dict[str, str]:
    """Check if the API is healthy and responding."""
    return {"status": "healthy"}


# Global exception handlers
@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    """Turn booking rule failures into client errors."""
    logger.info(f"Booking rejected ({exc.error_type}) on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "type": exc.error_type},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 like the booking schema check."""
    logger.warning(f"Request validation failed on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "type": "validation_error"},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Keep the {error: ...} body shape for framework and auth errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "type": "http_error"},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions globally."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "type": "internal_error"},
    )
