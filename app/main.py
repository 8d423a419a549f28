# main.py
# Main application file for the Eat With The Locals recipe service.

import logging.config
import os
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

# Import the CORS middleware
from fastapi.middleware.cors import CORSMiddleware

# Rate limiting
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

# Import local modules
from app.db.session import engine
from app import models
from app.api import favorites, ratings, recipes
from app.core.config import settings
from app.core.errors import AppError, PersistenceError
from app.core.logging_middleware import StructuredLoggingMiddleware

# Initialize rate limiter - uses client IP address for rate limit key
# Disabled during testing (when DATABASE_URL contains 'test')
_is_testing = "test" in os.environ.get("DATABASE_URL", "").lower()
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT],
    enabled=not _is_testing,
)

# Load logging configuration
_logging_config = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logging.ini")
logging.config.fileConfig(_logging_config, disable_existing_loggers=False)

# Get the logger instance
logger = logging.getLogger(__name__)


# Create all database tables
# This line creates the database file and the tables within it if they don't exist.
models.Base.metadata.create_all(bind=engine)

# Initialize the FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API for discovering local recipes around a point on the map.",
    version="1.0.0",
    root_path=settings.ROOT_PATH,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
)

# Add rate limiter to app state and register exception handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


# --- Error Handlers ---
# Responses carry a short message only; details stay in the logs.

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, PersistenceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc} ({exc.reason})")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": "Something went wrong, please try again"},
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    logger.debug(f"Rejected invalid request to {request.url.path}: {errors}")
    return JSONResponse(status_code=400, content={"detail": "Invalid request", "errors": errors})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Something went wrong, please try again"},
    )


# --- Add Structured Logging Middleware ---
app.add_middleware(StructuredLoggingMiddleware)
# --- End of Structured Logging Middleware ---

# --- Add CORS Middleware ---
# Origins loaded from settings

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,  # Allows specified origins
    allow_credentials=True,  # Allows cookies to be included in requests
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],  # Explicit HTTP methods
    allow_headers=["Content-Type", "Accept", "X-User-Id"],  # Explicit headers
)

# --- End of CORS Middleware Section ---

# --- Security Headers Middleware ---


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        # Prevent clickjacking
        response.headers["X-Frame-Options"] = "DENY"
        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"
        # Control referrer information
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        # Content Security Policy - restrict resource loading
        if settings.ENVIRONMENT in ["development", "testing"]:
            # Relaxed to allow FastAPI Swagger UI assets
            response.headers["Content-Security-Policy"] = (
                "default-src 'self'; "
                "img-src 'self' data: https://fastapi.tiangolo.com; "
                "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
                "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net"
            )
        else:
            response.headers["Content-Security-Policy"] = "default-src 'self'"
        return response


app.add_middleware(SecurityHeadersMiddleware)

# --- End of Security Headers Middleware ---

# Include API routers
app.include_router(recipes.router, prefix="/recipes", tags=["Recipes"])
app.include_router(favorites.router, prefix="/favorites", tags=["Favorites"])
app.include_router(ratings.router, prefix="/ratings", tags=["Ratings"])


@app.get("/", tags=["Root"])
async def read_root():
    """
    Root endpoint to check if the API is running.
    """
    logger.debug("Root endpoint accessed")
    return {"message": "Welcome to Eat With The Locals API", "environment": settings.ENVIRONMENT}


if __name__ == "__main__":
    # This block allows running the app directly with uvicorn for development.
    # In production, you would typically use a process manager like Gunicorn.
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
