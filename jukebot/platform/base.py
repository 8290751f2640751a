"""
Base class for platform clients.

The bot core only needs a narrow slice of a chat platform: event
subscription, login, the logged-in user and guild lookup. Concrete clients
wrap a real library behind this interface so the facade can be driven by a
mock in tests.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

EVENTS = ("ready", "message", "disconnect")

EventHandler = Callable[..., Awaitable[Any] | Any]


class PlatformClient(ABC):
    """
    Abstract platform client.

    Handlers registered with ``on`` are called in registration order, once per
    registration, every time the event fires.
    """

    @property
    @abstractmethod
    def user(self) -> Any:
        """The bot's own user (exposes ``id`` and ``mentioned_in(message)``)."""

    @abstractmethod
    def on(self, event: str, handler: EventHandler) -> None:
        """
        Register a handler for ``event``.

        Raises:
            ValueError: If ``event`` is not one of ``EVENTS``
        """

    @abstractmethod
    async def login(self, token: str) -> None:
        """
        Open the session and run it until it ends.

        Raises:
            Exception: Whatever a registered handler raised; handler errors are fatal
        """

    @abstractmethod
    def get_guild(self, guild_id: int) -> Any | None:
        """Return the guild with ``guild_id`` from the client cache, or None."""

    @abstractmethod
    async def close(self) -> None:
        """Close the session."""
