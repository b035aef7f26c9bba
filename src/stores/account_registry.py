"""Account registry kept in sync with the backend."""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from src import commands
from src.commands.channel import CommandChannel
from src.config import settings
from src.models.account import Account
from src.stores.expiry import days_until_expiry

logger = logging.getLogger(__name__)


class AccountRegistry:
    """Client-side view of the backend's account list.

    The local list is only ever replaced by a full ``get_accounts`` round
    trip. Mutations go to the backend first and are followed by a reload, so
    what is held here is always a snapshot the backend confirmed.
    """

    def __init__(
        self,
        channel: CommandChannel,
        clock: Optional[Callable[[], datetime]] = None,
        expiry_months: Optional[int] = None,
    ):
        self.channel = channel
        self.clock = clock or datetime.now
        self.expiry_months = expiry_months if expiry_months is not None else settings.expiry_months

        self.accounts: List[Account] = []
        self.selected_account: Optional[Account] = None
        self.is_loading_accounts = False
        self.account_error: Optional[str] = None

    async def load_accounts(self) -> List[Account]:
        """Fetch the full account list and replace the local one."""
        self.is_loading_accounts = True
        self.account_error = None
        try:
            data = await self.channel.invoke(commands.GET_ACCOUNTS)
            accounts = [Account.model_validate(item) for item in data or []]
            self.accounts = accounts
            logger.debug(f"Loaded {len(accounts)} accounts")
            return accounts
        except Exception as e:
            self.account_error = str(e)
            logger.error(f"Failed to load accounts: {e}")
            raise
        finally:
            self.is_loading_accounts = False

    async def save_account(self, account: Account):
        """Create or update an account, then reload."""
        self.account_error = None
        try:
            await self.channel.invoke(
                commands.SAVE_ACCOUNT,
                {"account": account.model_dump(by_alias=True)},
            )
        except Exception as e:
            self.account_error = str(e)
            logger.error(f"Failed to save account {account.email}: {e}")
            raise

        # A failed refresh records and logs its own error
        await self.load_accounts()
        logger.info(f"Saved account: {account.email}")

    async def delete_account(self, account_id: str):
        """Delete an account by id, then reload."""
        self.account_error = None
        try:
            await self.channel.invoke(commands.DELETE_ACCOUNT, {"id": account_id})
        except Exception as e:
            self.account_error = str(e)
            logger.error(f"Failed to delete account {account_id}: {e}")
            raise

        await self.load_accounts()
        logger.info(f"Deleted account: {account_id}")

    async def update_last_login(self, account_id: str):
        """Have the backend stamp the login time for an account, then reload."""
        self.account_error = None
        try:
            await self.channel.invoke(commands.UPDATE_LAST_LOGIN, {"id": account_id})
        except Exception as e:
            self.account_error = str(e)
            logger.error(f"Failed to update last login for {account_id}: {e}")
            raise

        await self.load_accounts()

    def select_account(self, account: Optional[Account]):
        # Held by value; a reload does not re-resolve it
        self.selected_account = account

    def get_days_until_expiry(self, account: Account) -> Optional[int]:
        return days_until_expiry(account.last_login_time, now=self.clock(), months=self.expiry_months)
