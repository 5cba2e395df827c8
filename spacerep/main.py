"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from spacerep.config import configure_logging, get_settings
from spacerep.database import dispose_engine, initialize_database
from spacerep.domain.common.exceptions import (
    AuthorizationError,
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
)
from spacerep.exceptions import SpaceRepError
from spacerep.infrastructure.common.rate_limit import limiter
from spacerep.infrastructure.common.routers import settings as settings_router
from spacerep.infrastructure.identity.routers import auth, users
from spacerep.infrastructure.learning.routers import (
    cards,
    decks,
    flashcard_suggestions,
    statistics,
    study,
)

settings = get_settings()
configure_logging(settings.ENVIRONMENT)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize the database on startup and release connections on shutdown."""
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")
    initialize_database(settings)
    yield
    dispose_engine()
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Spaced repetition flashcards with an adaptive review scheduler",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SpaceRepError)
async def spacerep_error_handler(request: Request, exc: SpaceRepError) -> JSONResponse:
    """Map application errors to their status code."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to HTTP status codes."""
    if isinstance(exc, EntityNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, AuthorizationError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, BusinessRuleViolationError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


for router in (
    auth.router,
    users.router,
    decks.router,
    cards.router,
    study.router,
    statistics.router,
    flashcard_suggestions.router,
    settings_router.router,
):
    app.include_router(router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/")
async def api_root() -> dict[str, str]:
    """API v1 root endpoint."""
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": "/docs",
    }
