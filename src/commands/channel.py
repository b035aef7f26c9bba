"""Command channel to the backend service."""

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """A backend command failed.

    The message is opaque display text. ``command`` is kept for logging only.
    """

    def __init__(self, command: str, message: str):
        super().__init__(message)
        self.command = command
        self.message = message

    def __str__(self):
        return self.message


class CommandChannel(Protocol):
    """Anything that can dispatch a named command and await its response."""

    async def invoke(self, command: str, args: Optional[Dict[str, Any]] = None) -> Any:
        ...


class CommandRegistry:
    """In-process channel dispatching commands to registered handlers."""

    def __init__(self):
        self._handlers: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str, handler: Optional[Callable[..., Any]] = None):
        """Register a handler for a command. Usable as a decorator."""
        if handler is not None:
            self._handlers[name] = handler
            return handler

        def decorator(func: Callable[..., Awaitable[Any]]):
            self._handlers[name] = func
            return func

        return decorator

    @property
    def commands(self):
        return sorted(self._handlers)

    async def invoke(self, command: str, args: Optional[Dict[str, Any]] = None) -> Any:
        handler = self._handlers.get(command)
        if handler is None:
            raise CommandError(command, f"Unknown command: {command}")

        logger.debug(f"Invoking command {command}")
        try:
            result = handler(**(args or {}))
            if inspect.isawaitable(result):
                result = await result
        except CommandError:
            raise
        except Exception as e:
            raise CommandError(command, str(e)) from e

        return result
