"""Background polling of the email receiver status."""

import asyncio
import logging
from typing import Optional

from src.config import settings
from src.stores.email_status_tracker import EmailStatusTracker

logger = logging.getLogger(__name__)


class StatusPoller:
    """Periodically refreshes the tracker's receiver snapshot."""

    def __init__(
        self,
        tracker: EmailStatusTracker,
        interval: Optional[float] = None,
        error_interval: Optional[float] = None,
    ):
        self.tracker = tracker
        self.interval = interval if interval is not None else settings.status_poll_interval
        self.error_interval = error_interval if error_interval is not None else settings.status_poll_error_interval
        self.polling = False
        self.poll_count = 0

    async def start_polling(self):
        """Start the polling loop."""
        if self.polling:
            logger.warning("Status polling already running")
            return

        self.polling = True
        logger.info(f"Starting status polling every {self.interval}s")

        while self.polling:
            try:
                await self.tracker.get_email_status()
                self.poll_count += 1
                await asyncio.sleep(self.interval)
            except Exception as e:
                logger.error(f"Error in status polling loop: {e}")
                await asyncio.sleep(self.error_interval)

    async def stop_polling(self):
        """Stop the polling loop after the current cycle."""
        logger.info("Stopping status polling")
        self.polling = False
