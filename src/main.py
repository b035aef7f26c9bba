"""Entry point for serving the credential sync store."""

import logging
import sys
from typing import Optional

import uvicorn

from src.commands.channel import CommandChannel
from src.config import settings
from src.server import create_app
from src.stores import AppStore

logger = logging.getLogger(__name__)


def configure_logging():
    """Configure root logging from settings."""
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def serve(channel: CommandChannel, host: Optional[str] = None, port: Optional[int] = None):
    """Serve the store over HTTP, backed by the given command channel."""
    configure_logging()

    host = host or settings.api_host
    port = port or settings.api_port

    store = AppStore(channel)
    app = create_app(store)

    logger.info(f"Starting credential sync store on {host}:{port}")
    logger.info("HTTP API available at: /api/v1")
    logger.info("API Documentation available at: /docs")

    try:
        uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())
    except KeyboardInterrupt:
        logger.info("Shutting down credential sync store...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
