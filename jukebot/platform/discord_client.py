"""
discord.py-backed platform client.

Wraps a ``discord.Client`` and fans its ``on_ready`` / ``on_message`` events out
to handlers registered through ``on()``. The gateway is started with
``reconnect=False``: a dropped connection becomes a single ``disconnect``
event instead of a silent reconnect.
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any

import aiohttp
import discord

from jukebot.config.logging import get_logger
from jukebot.platform.base import EVENTS, EventHandler, PlatformClient

logger = get_logger(__name__)


@dataclass(frozen=True)
class DisconnectInfo:
    """Why the gateway connection ended."""

    reason: str | None
    code: int | None


# What discord.py raises from start() when reconnect is off
GATEWAY_ERRORS = (
    OSError,
    discord.HTTPException,
    discord.GatewayNotFound,
    discord.ConnectionClosed,
    discord.PrivilegedIntentsRequired,
    aiohttp.ClientError,
    asyncio.TimeoutError,
)


def _disconnect_info(error: BaseException) -> DisconnectInfo:
    if isinstance(error, discord.ConnectionClosed):
        return DisconnectInfo(reason=error.reason or None, code=error.code)
    if isinstance(error, discord.PrivilegedIntentsRequired):
        # discord.py raises this in place of ConnectionClosed for close code 4014
        return DisconnectInfo(reason=str(error), code=4014)
    if isinstance(error, discord.HTTPException):
        return DisconnectInfo(reason=error.text or str(error), code=error.status)
    return DisconnectInfo(reason=str(error) or type(error).__name__, code=getattr(error, "errno", None))


class DiscordPlatform(PlatformClient):
    """
    Platform client for Discord.

    discord.py logs and swallows exceptions raised inside event callbacks. Here
    the first exception raised by a registered handler is kept, the client is
    closed, and ``login()`` re-raises it, so handler errors stay fatal.

    Args:
        client: Pre-built ``discord.Client``. When omitted, one is created with
                the default intents plus ``message_content``.
    """

    def __init__(self, client: discord.Client | None = None) -> None:
        if client is None:
            intents = discord.Intents.default()
            intents.message_content = True  # Required to read command text
            client = discord.Client(intents=intents)
        self._client = client
        self._handlers: dict[str, list[EventHandler]] = {event: [] for event in EVENTS}
        self._fatal: BaseException | None = None
        self._closing = False

        client.event(self.on_ready)
        client.event(self.on_message)

    @property
    def client(self) -> discord.Client:
        return self._client

    @property
    def user(self) -> discord.ClientUser | None:
        return self._client.user

    def on(self, event: str, handler: EventHandler) -> None:
        if event not in self._handlers:
            raise ValueError(f"Unsupported event {event!r}; expected one of {', '.join(EVENTS)}")
        self._handlers[event].append(handler)

    def get_guild(self, guild_id: int) -> discord.Guild | None:
        return self._client.get_guild(guild_id)

    async def login(self, token: str) -> None:
        try:
            await self._client.start(token, reconnect=False)
        except GATEWAY_ERRORS as e:
            logger.debug(f"Gateway connection failed: {e!r}")
            await self.dispatch("disconnect", _disconnect_info(e))
        else:
            # start() also returns on a clean close (code 1000)
            if self._fatal is None and not self._closing:
                logger.debug("Gateway connection ended without an error")
                await self.dispatch("disconnect", DisconnectInfo(reason="Connection closed", code=None))

        if self._fatal is not None:
            raise self._fatal

    async def close(self) -> None:
        self._closing = True
        await self._client.close()

    async def dispatch(self, event: str, *args: Any) -> None:
        """Call every handler registered for ``event`` in order, awaiting coroutines."""
        for handler in list(self._handlers[event]):
            result = handler(*args)
            if inspect.isawaitable(result):
                await result

    # ------------------------------------------------------------------
    # discord.py event callbacks
    # ------------------------------------------------------------------

    async def on_ready(self) -> None:
        logger.debug(f"Gateway ready as {self._client.user}")
        await self._dispatch_fatal("ready")

    async def on_message(self, message: discord.Message) -> None:
        await self._dispatch_fatal("message", message)

    async def _dispatch_fatal(self, event: str, *args: Any) -> None:
        if self._fatal is not None:
            return
        try:
            await self.dispatch(event, *args)
        except Exception as e:
            logger.exception(f"Handler for {event!r} failed, closing the client: {e}")
            self._fatal = e
            self._closing = True
            await self._client.close()
