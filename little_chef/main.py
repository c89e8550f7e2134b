"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from little_chef import __version__
from little_chef.api.routes import favorites, health, recipes
from little_chef.config import settings
from little_chef.core.request_id import get_request_id
from little_chef.middleware.logging import RequestLoggingMiddleware
from little_chef.middleware.rate_limit import get_rate_limit_exceeded_handler, limiter
from little_chef.middleware.security import SecurityHeadersMiddleware, setup_compression, setup_cors
from little_chef.utils.exceptions import (
    GenerationError,
    GenerationInProgressError,
    IdentifierConflictError,
    LittleChefException,
    RecipeNotFoundError,
    ValidationError,
)
from little_chef.utils.logging_config import setup_logging

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Shown to the user whenever recipe text generation fails.
GENERATION_FAILED_MESSAGE = "אופס! השף הקטן התבלבל קצת. נסו שוב או בדקו את חיבור האינטרנט."


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Little Chef API starting up...")
    logger.info(f"Log level: {settings.log_level}")
    logger.info(f"Generation enabled: {settings.generation_enabled}")
    yield
    logger.info("Little Chef API shutting down...")


app = FastAPI(
    title="Little Chef API",
    description="Recipe catalog, search and Gemini recipe generation for young cooks",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, get_rate_limit_exceeded_handler())


def _request_id(request: Request) -> Optional[str]:
    # The context variable is already reset when ServerErrorMiddleware handles a 500.
    return getattr(request.state, "request_id", None) or get_request_id()


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors with detailed messages."""
    request_id = _request_id(request)

    logger.warning(
        f"Validation error: {str(exc)}",
        extra={"request_id": request_id, "path": request.url.path, "method": request.method},
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation error",
            "detail": jsonable_encoder(exc.errors()),
            "request_id": request_id,
        },
    )


@app.exception_handler(LittleChefException)
async def little_chef_exception_handler(request: Request, exc: LittleChefException) -> JSONResponse:
    """Map domain exceptions to HTTP responses."""
    request_id = _request_id(request)
    detail = str(exc)

    if isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        error_message = "Validation error"
    elif isinstance(exc, RecipeNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
        error_message = "Recipe not found"
    elif isinstance(exc, (IdentifierConflictError, GenerationInProgressError)):
        status_code = status.HTTP_409_CONFLICT
        error_message = "Conflict"
    elif isinstance(exc, GenerationError):
        status_code = status.HTTP_502_BAD_GATEWAY
        error_message = GENERATION_FAILED_MESSAGE
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        error_message = "Internal server error"

    if status_code >= 500:
        logger.error(
            f"Exception: {error_message}",
            extra={"request_id": request_id, "exception": detail},
            exc_info=exc,
        )
    else:
        logger.info(
            f"Request rejected: {error_message}",
            extra={"request_id": request_id, "exception": detail},
        )

    return JSONResponse(
        status_code=status_code,
        content={"error": error_message, "detail": detail, "request_id": request_id},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    request_id = _request_id(request)

    logger.error(
        f"Unexpected exception: {str(exc)}",
        extra={"request_id": request_id},
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": "An unexpected error occurred",
            "request_id": request_id,
        },
    )


# Add middleware (order matters!)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
setup_compression(app)
setup_cors(app)

app.include_router(health.router)
app.include_router(recipes.router)
app.include_router(favorites.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Little Chef API",
        "version": __version__,
        "docs": "/docs",
    }


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
