"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, static assets and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.adapters.repository.memory import InMemoryStore
from src.api.endpoints import router as api_router
from src.api.errors import install_exception_handlers
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {"name": "accounts", "description": "Signup with simulated BVN verification, and login"},
    {"name": "transactions", "description": "Escrow transactions: create, list, confirm delivery, request refund"},
    {"name": "admin", "description": "Refund adjudication and fraud flagging"},
    {"name": "support", "description": "Support message intake"},
    {"name": "debug", "description": "Whole-ledger dump for development"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Logs startup and shutdown. All state is in memory and is lost
    when the process exits.
    """
    logger.info("Starting application...")
    logger.info("Application startup complete")

    yield

    store: InMemoryStore = app.state.store
    logger.info(
        "Shutting down application, discarding %s users and %s transactions",
        store.users.count(),
        len(store.transactions.list_all()),
    )


def create_app(settings: Settings | None = None, store: InMemoryStore | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration, defaults to the cached environment settings
        store: Collections backing the services, defaults to a fresh empty store
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Escrow Transaction API - Prototype escrow with simulated BVN checks and admin refund review",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else InMemoryStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint. Returns 200 OK while the process is serving."""
        return {"status": "healthy"}

    # Mounted last so API routes take precedence over static files
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.debug("Static directory %s not found, not serving assets", static_dir)

    return app


app = create_app()


def run() -> None:
    """Console entry point: configure logging and serve the app with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Escrow prototype server running on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
