from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import uuid
import logging
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db, close_database_connection, is_unique_violation
from app.core.responses import APIError, error_response, format_validation_errors
from app.api import health, packages, destinations, blog, bookings, inquiries

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("Starting Wanderlust Travel API")

    # Create database tables
    init_db()

    yield

    # Shutdown
    close_database_connection()
    logger.info("Shutting down Wanderlust Travel API")


# Create FastAPI app
app = FastAPI(
    title="Wanderlust Travel API",
    description="Tour packages, destinations and travel blog for the Wanderlust Travel website",
    version=settings.api_version,
    lifespan=lifespan
)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag each request with an id, time it and stamp the response headers."""
    request.state.request_id = request_id = uuid.uuid4().hex
    started = time.perf_counter()

    response = await call_next(request)

    response.headers.update(SECURITY_HEADERS)
    response.headers["X-Request-ID"] = request_id
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000,
        extra={"request_id": request_id, "client_ip": request.client.host if request.client else None},
    )
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    """Render expected failures raised by route handlers."""
    return error_response(exc.status_code, exc.error, exc.details)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with consistent format."""
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed or invalid request bodies are client errors (400)."""
    return error_response(400, "Validation failed", format_validation_errors(exc.errors()))


@app.exception_handler(ValidationError)
async def document_validation_handler(request: Request, exc: ValidationError):
    """Validation of merged documents during updates."""
    return error_response(400, "Validation failed", format_validation_errors(exc.errors()))


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Constraint violations not handled by the route itself."""
    logger.warning(f"Integrity error: {exc.orig}")
    if is_unique_violation(exc):
        return error_response(409, "Duplicate key")
    return error_response(400, "Constraint violation")


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(
        f"Unhandled exception: {str(exc)}",
        extra={
            "request_id": getattr(request.state, "request_id", "unknown"),
            "exception_type": type(exc).__name__
        },
        exc_info=True
    )

    extra = {"detail": str(exc)} if settings.environment == "development" else {}
    return error_response(500, "Internal server error", **extra)


# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(packages.router, prefix="/api")
app.include_router(destinations.router, prefix="/api")
app.include_router(blog.router, prefix="/api")
app.include_router(bookings.router, prefix="/api")
app.include_router(inquiries.router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Wanderlust Travel API",
        "version": settings.api_version,
        "docs": "/docs",
        "health": "/api/health"
    }
