"""Driveway permit lookup — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from driveways.adapters.persistence.database import engine
from driveways.infrastructure.api.routes_addresses import router as addresses_router
from driveways.infrastructure.api.routes_health import router as health_router
from driveways.infrastructure.api.routes_processing import router as processing_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Driveway Permit Lookup",
        description="Permitted driveways and curb cuts on a map, searchable by address or street",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the Next.js map front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(addresses_router, prefix="/api")
    app.include_router(processing_router, prefix="/api")

    return app


app = create_app()
