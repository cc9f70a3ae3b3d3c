"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from claims_backend.api.middleware import RequestContextMiddleware
from claims_backend.api.routes import claims
from claims_backend.core.config import settings
from claims_backend.core.logging import get_logger, setup_logging
from claims_backend.db.models import Base
from claims_backend.db.session import engine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(settings.log_level, json_logs=settings.LOG_JSON)
    startup_logger = get_logger("startup")
    startup_logger.info("Application starting", env=settings.APP_ENV)
    if settings.DB_CREATE_ALL:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        startup_logger.info("Database tables ensured")
    yield
    await engine.dispose()
    startup_logger.info("Application shutting down")


async def storage_failure_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Any database error becomes a generic 500."""
    logger.error(
        "Storage failure",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )


API_PREFIX = "/api"


def create_app() -> FastAPI:
    app = FastAPI(
        title="Claims Management API",
        description="Insurance claim records with soft-delete, fraud flagging and search",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SQLAlchemyError, storage_failure_handler)

    app.include_router(claims.router, prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Public health-check endpoint."""
        return {"status": "ok", "env": settings.APP_ENV}

    return app


app = create_app()
