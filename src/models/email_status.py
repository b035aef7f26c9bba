"""Email receiver status snapshot and verification code models."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import CamelModel


class EmailStatus(str, Enum):
    """Receiver lifecycle states as reported by the backend."""

    IDLE = "idle"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    RECEIVING = "receiving"
    ERROR = "error"
    STOPPED = "stopped"


class EmailReceiverStatus(CamelModel):
    """Point-in-time snapshot of the background receiver."""

    status: EmailStatus = EmailStatus.IDLE
    error_message: Optional[str] = None  # Only meaningful when status is ERROR
    last_check_time: Optional[int] = None  # Epoch milliseconds
    codes_count: int = Field(default=0, ge=0)

    @property
    def last_checked_at(self) -> Optional[datetime]:
        if self.last_check_time is None:
            return None
        return datetime.fromtimestamp(self.last_check_time / 1000, tz=timezone.utc)

    def __repr__(self):
        return f"<EmailReceiverStatus(status='{self.status.value}', codes_count={self.codes_count})>"


class VerificationCode(CamelModel):
    """A verification code picked up by the receiver."""

    code: str
    timestamp: int  # Epoch milliseconds of the originating email
    sender: str = Field(alias="from")
    subject: str = ""
