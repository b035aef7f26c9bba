"""Test configuration and fixtures."""

import os
import uuid
from datetime import datetime

import pytest

os.environ["CREDSYNC_POLL_STATUS_ON_STARTUP"] = "false"
os.environ["CREDSYNC_LOG_LEVEL"] = "DEBUG"

from src import commands
from src.commands.channel import CommandRegistry


class FakeBackend:
    """In-memory backend registered on a CommandRegistry.

    Records every command it receives and can be told to fail any command.
    """

    def __init__(self, accounts=None):
        self.accounts = [dict(a) for a in (accounts or [])]
        self.status = {"status": "idle", "codesCount": 0}
        self.codes = []
        self.calls = []
        self.failures = {}
        self.login_time = "2024-01-15T00:00:00+00:00"
        self.registry = CommandRegistry()

        self.registry.register(commands.GET_ACCOUNTS, self.get_accounts)
        self.registry.register(commands.SAVE_ACCOUNT, self.save_account)
        self.registry.register(commands.DELETE_ACCOUNT, self.delete_account)
        self.registry.register(commands.UPDATE_LAST_LOGIN, self.update_last_login)
        self.registry.register(commands.GET_EMAIL_RECEIVER_STATUS, self.get_email_receiver_status)
        self.registry.register(commands.TEST_EMAIL_CONNECTION, self.test_email_connection)
        self.registry.register(commands.START_EMAIL_RECEIVER, self.start_email_receiver)
        self.registry.register(commands.STOP_EMAIL_RECEIVER, self.stop_email_receiver)
        self.registry.register(commands.GET_VERIFICATION_CODES, self.get_verification_codes)

    def fail(self, command, message):
        self.failures[command] = message

    def _record(self, command, **args):
        self.calls.append((command, args))
        if command in self.failures:
            raise RuntimeError(self.failures[command])

    async def get_accounts(self):
        self._record(commands.GET_ACCOUNTS)
        return [dict(a) for a in self.accounts]

    async def save_account(self, account):
        self._record(commands.SAVE_ACCOUNT, account=account)
        account = dict(account)
        if not account.get("id"):
            account["id"] = uuid.uuid4().hex
        for pos, existing in enumerate(self.accounts):
            if existing["id"] == account["id"]:
                self.accounts[pos] = account
                return None
        self.accounts.append(account)
        return None

    async def delete_account(self, id):
        self._record(commands.DELETE_ACCOUNT, id=id)
        self.accounts = [a for a in self.accounts if a["id"] != id]

    async def update_last_login(self, id):
        self._record(commands.UPDATE_LAST_LOGIN, id=id)
        for account in self.accounts:
            if account["id"] == id:
                account["lastLoginTime"] = self.login_time

    async def get_email_receiver_status(self):
        self._record(commands.GET_EMAIL_RECEIVER_STATUS)
        return dict(self.status)

    async def test_email_connection(self, email, password, server, port):
        self._record(commands.TEST_EMAIL_CONNECTION, email=email, password=password, server=server, port=port)
        return "Connection successful"

    async def start_email_receiver(self, email, password, server, port):
        self._record(commands.START_EMAIL_RECEIVER, email=email, password=password, server=server, port=port)
        self.status = {"status": "connecting", "codesCount": 0, "lastCheckTime": 1705276800000}

    async def stop_email_receiver(self):
        self._record(commands.STOP_EMAIL_RECEIVER)
        self.status = {"status": "stopped", "codesCount": len(self.codes), "lastCheckTime": 1705276810000}

    async def get_verification_codes(self):
        self._record(commands.GET_VERIFICATION_CODES)
        return list(self.codes)

    def command_names(self):
        return [name for name, _ in self.calls]


@pytest.fixture
def sample_account_data():
    """Sample account as the backend sends it."""
    return {
        "id": "acc-1",
        "email": "user@example.com",
        "password": "login-secret",
        "emailPassword": "mail-secret",
        "smtpServer": "pop.example.com",
        "smtpPort": 995,
        "lastLoginTime": None,
    }


@pytest.fixture
def second_account_data():
    return {
        "id": "acc-2",
        "email": "other@example.com",
        "password": "login-secret-2",
        "emailPassword": "mail-secret-2",
        "smtpServer": "pop.example.org",
        "smtpPort": 995,
        "lastLoginTime": "2024-01-15T00:00:00",
    }


@pytest.fixture
def backend(sample_account_data, second_account_data):
    """Fake backend holding two accounts."""
    return FakeBackend([sample_account_data, second_account_data])


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2024-02-10 local time."""
    return lambda: datetime(2024, 2, 10)
