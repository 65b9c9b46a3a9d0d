import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rosterforge.api import (
    characters_router,
    combos_router,
    decks_router,
    health_router,
)
from rosterforge.config import settings
from rosterforge.db.database import async_session_factory, init_db
from rosterforge.jobs.seed_catalog import seed_sample_catalog
from rosterforge.models.failure import KnownError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    await init_db()
    if settings.seed_sample_catalog:
        async with async_session_factory() as session:
            await seed_sample_catalog(session)
            await session.commit()
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("rosterforge"),
    lifespan=lifespan,
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Report a classified failure with its own status code."""
    logger.info("Request failed with %s: %s", exc.kind.value, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "kind": exc.kind.value,
            "suggestion": exc.suggestion,
        },
    )


app.include_router(characters_router)
app.include_router(combos_router)
app.include_router(decks_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
