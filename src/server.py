"""FastAPI application serving the client store."""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.config import settings
from src.handlers.store_handler import router as store_router
from src.stores import AppStore
from src.stores.status_poller import StatusPoller

logger = logging.getLogger(__name__)


def create_app(store: AppStore, poll_status: Optional[bool] = None) -> FastAPI:
    """Build the API around an already constructed store."""
    if poll_status is None:
        poll_status = settings.poll_status_on_startup

    status_poller = StatusPoller(store.tracker)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan - startup and shutdown."""
        logger.info("Starting credential sync store...")

        if poll_status:
            app.state.polling_task = asyncio.create_task(status_poller.start_polling())

        logger.info("Credential sync store started successfully")

        yield

        logger.info("Shutting down credential sync store...")

        await status_poller.stop_polling()

        if hasattr(app.state, "polling_task"):
            app.state.polling_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await app.state.polling_task

        logger.info("Credential sync store shut down complete")

    app = FastAPI(
        title="Credential Sync Store",
        description="Account registry and email receiver status synchronized with the backend",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.status_poller = status_poller

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception: %s", exc, exc_info=True)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "credential-sync", "poller_active": status_poller.polling}

    app.include_router(store_router)

    return app
