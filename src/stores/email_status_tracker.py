"""Email receiver status tracking."""

import logging
from typing import List

from src import commands
from src.commands.channel import CommandChannel
from src.models.email_status import EmailReceiverStatus, VerificationCode

logger = logging.getLogger(__name__)


class EmailStatusTracker:
    """Mirrors the backend receiver's status by polling.

    Snapshots are replaced wholesale. Transitions that happen and revert
    between two polls are not observed.
    """

    def __init__(self, channel: CommandChannel):
        self.channel = channel
        self.email_status = EmailReceiverStatus()
        self.verification_codes: List[VerificationCode] = []

    async def get_email_status(self) -> EmailReceiverStatus:
        """Poll the receiver status and replace the local snapshot."""
        try:
            data = await self.channel.invoke(commands.GET_EMAIL_RECEIVER_STATUS)
            status = EmailReceiverStatus.model_validate(data)
        except Exception as e:
            logger.error(f"Failed to get email status: {e}")
            raise

        self.email_status = status
        return status

    async def test_email_connection(self, email: str, password: str, server: str, port: int) -> str:
        """Ask the backend for a one-shot connectivity probe.

        Parameters are passed through unchecked. The result string is returned
        as the backend wrote it.
        """
        try:
            result = await self.channel.invoke(
                commands.TEST_EMAIL_CONNECTION,
                {"email": email, "password": password, "server": server, "port": port},
            )
        except Exception as e:
            logger.error(f"Email connection test failed for {email}: {e}")
            raise

        logger.info(f"Email connection test for {email}: {result}")
        return result

    async def start_email_receiver(self, email: str, password: str, server: str, port: int) -> EmailReceiverStatus:
        """Start the background receiver, then refresh the snapshot."""
        try:
            await self.channel.invoke(
                commands.START_EMAIL_RECEIVER,
                {"email": email, "password": password, "server": server, "port": port},
            )
        except Exception as e:
            logger.error(f"Failed to start email receiver for {email}: {e}")
            raise

        logger.info(f"Started email receiver for {email} on {server}:{port}")
        return await self.get_email_status()

    async def stop_email_receiver(self) -> EmailReceiverStatus:
        """Stop the background receiver, then refresh the snapshot."""
        try:
            await self.channel.invoke(commands.STOP_EMAIL_RECEIVER)
        except Exception as e:
            logger.error(f"Failed to stop email receiver: {e}")
            raise

        logger.info("Stopped email receiver")
        return await self.get_email_status()

    async def get_verification_codes(self) -> List[VerificationCode]:
        """Fetch the codes the receiver has collected, replacing the local list."""
        try:
            data = await self.channel.invoke(commands.GET_VERIFICATION_CODES)
            codes = [VerificationCode.model_validate(item) for item in data or []]
        except Exception as e:
            logger.error(f"Failed to get verification codes: {e}")
            raise

        self.verification_codes = codes
        return codes
