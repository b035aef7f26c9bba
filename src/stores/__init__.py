# Client-side state stores

from datetime import datetime
from typing import Callable, Optional

from src.commands.channel import CommandChannel
from src.stores.account_registry import AccountRegistry
from src.stores.email_status_tracker import EmailStatusTracker


class AppStore:
    """Process-wide state handed to UI code.

    Holds the account registry and the email status tracker, which share one
    command channel and nothing else.
    """

    def __init__(
        self,
        channel: CommandChannel,
        clock: Optional[Callable[[], datetime]] = None,
        expiry_months: Optional[int] = None,
    ):
        self.channel = channel
        self.registry = AccountRegistry(channel, clock=clock, expiry_months=expiry_months)
        self.tracker = EmailStatusTracker(channel)

    def snapshot(self) -> dict:
        """Current view state, without issuing any command."""
        return {
            "accounts": list(self.registry.accounts),
            "selected_account": self.registry.selected_account,
            "is_loading_accounts": self.registry.is_loading_accounts,
            "account_error": self.registry.account_error,
            "email_status": self.tracker.email_status,
            "verification_codes": list(self.tracker.verification_codes),
        }


__all__ = ["AppStore", "AccountRegistry", "EmailStatusTracker"]
