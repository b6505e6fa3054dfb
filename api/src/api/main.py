"""FastAPI application entry point."""

from collections.abc import Callable
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.config import Settings, settings
from api.routes import rebuttals, structured_arguments, topics
from argumentation_core import __version__
from argumentation_core.db.session import default_session_factory, make_engine, make_session_factory
from argumentation_core.errors import NotFound, ValidationFailure
from argumentation_core.logger import configure_logging, get_logger
from argumentation_core.settings import settings as core_settings

log = get_logger(__name__)


@lru_cache(maxsize=None)
def _factory_for(database_url: str | None):
    if database_url is None:
        return default_session_factory()
    return make_session_factory(make_engine(database_url, echo=core_settings.sql_echo))


def create_app(
    session_factory: Callable[[], Session] | None = None,
    api_settings: Settings | None = None,
) -> FastAPI:
    api_settings = api_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        configure_logging(core_settings.log_level, json_output=core_settings.log_json)
        log.info("Argumentation API %s starting", __version__)
        yield

    app = FastAPI(
        title="Argumentation API",
        description="Explore and extend a debate graph of topics, claims, premises and rebuttals",
        version=__version__,
        debug=api_settings.debug,
        lifespan=lifespan,
    )

    if session_factory is None:
        # Engine is built on first request, not at import time.
        database_url = api_settings.database_url
        session_factory = lambda: _factory_for(database_url)()  # noqa: E731
    app.state.session_factory = session_factory

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_settings.cors_origin_list,
        allow_credentials="*" not in api_settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationFailure)
    async def validation_failure_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc), "field": exc.field})

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(SQLAlchemyError)
    async def storage_fault_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        log.error("Storage fault on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Storage fault"})

    # Include routers
    app.include_router(rebuttals.router, prefix="/api/rebuttals", tags=["rebuttals"])
    app.include_router(
        structured_arguments.router, prefix="/api/structured-arguments", tags=["structured-arguments"]
    )
    app.include_router(topics.router, prefix="/api", tags=["topics"])

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
