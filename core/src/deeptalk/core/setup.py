import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import _AsyncGeneratorContextManager, asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .db.database import create_tables
from .logger import setup_logging

LOGGER = logging.getLogger(__name__)


def lifespan_factory(
    settings: Settings,
    create_tables_on_start: bool = True,
) -> Callable[[FastAPI], _AsyncGeneratorContextManager[None]]:
    """Factory to create a lifespan async context manager for a FastAPI app."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(settings.LOG_LEVEL)
        if create_tables_on_start:
            await create_tables()
            LOGGER.info("Database tables ensured")
        LOGGER.info(f"{settings.APP_NAME} {settings.APP_VERSION} started ({settings.ENVIRONMENT.value})")
        yield

    return lifespan


def create_application(
    router: APIRouter,
    settings: Settings,
    lifespan: Callable[[FastAPI], _AsyncGeneratorContextManager[None]] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan or lifespan_factory(settings),
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(router)
    return application
