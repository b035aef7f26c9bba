"""Tests for the in-process command channel."""

import pytest

from src.commands.channel import CommandError, CommandRegistry


@pytest.mark.asyncio
async def test_invoke_async_handler():
    """Test arguments are passed as keywords to async handlers."""
    registry = CommandRegistry()

    @registry.register("echo")
    async def echo(value):
        return value

    assert await registry.invoke("echo", {"value": 42}) == 42


@pytest.mark.asyncio
async def test_invoke_sync_handler():
    """Test plain functions can be registered too."""
    registry = CommandRegistry()
    registry.register("ping", lambda: "pong")

    assert await registry.invoke("ping") == "pong"
    assert registry.commands == ["ping"]


@pytest.mark.asyncio
async def test_unknown_command():
    registry = CommandRegistry()

    with pytest.raises(CommandError) as exc_info:
        await registry.invoke("missing")

    assert exc_info.value.command == "missing"
    assert str(exc_info.value) == "Unknown command: missing"


@pytest.mark.asyncio
async def test_handler_failure_is_wrapped():
    """Test handler exceptions become CommandError with an opaque message."""
    registry = CommandRegistry()

    @registry.register("explode")
    async def explode():
        raise ValueError("File not found")

    with pytest.raises(CommandError) as exc_info:
        await registry.invoke("explode")

    assert str(exc_info.value) == "File not found"
    assert exc_info.value.command == "explode"
    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.asyncio
async def test_command_error_passes_through():
    registry = CommandRegistry()
    original = CommandError("save_account", "denied")

    @registry.register("save_account")
    async def save_account(account):
        raise original

    with pytest.raises(CommandError) as exc_info:
        await registry.invoke("save_account", {"account": {}})

    assert exc_info.value is original
