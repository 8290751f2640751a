"""
MusicBot, the bot facade.

Owns the configuration, the session state, the message catalog and the
command registry, and routes platform events to them:

- ``init()`` validates the config, registers ready/message/disconnect
  handlers (in that order) and logs in
- ``on_ready()`` resolves the configured server and text channel
- ``on_message()`` ignores, answers a mention, or dispatches a prefix command
- ``on_disconnect()`` logs and raises; a disconnect is terminal

The lifecycle is tracked explicitly in ``phase``:
``UNINITIALIZED -> AWAITING_READY -> ACTIVE -> DISCONNECTED``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from functools import partial
from typing import TYPE_CHECKING, Any

import discord

from jukebot.bot.catalog import (
    MESSAGE_ARGUMENTS,
    Catalog,
    MessageArg,
    MessageKey,
    PreferenceKey,
)
from jukebot.bot.commands import CommandRegistry, default_registry
from jukebot.bot.errors import (
    CatalogLookupError,
    ChannelLookupError,
    ConfigError,
    DisconnectedError,
    HandlerError,
    ServerConnectionError,
)
from jukebot.bot.state import BotState
from jukebot.config.logging import LogLevel, get_logger

if TYPE_CHECKING:
    from jukebot.config.settings import BotSettings
    from jukebot.platform.base import PlatformClient

logger = get_logger(__name__)

REQUIRED_SETTINGS = ("token", "server_id", "text_channel_id")


class BotPhase(Enum):
    UNINITIALIZED = "uninitialized"
    AWAITING_READY = "awaiting_ready"
    ACTIVE = "active"
    DISCONNECTED = "disconnected"


class MusicBot:
    """
    Prefix-command bot for a single server and text channel.

    Args:
        settings: Bot configuration (token, server/channel IDs, prefix, overrides)
        client: Platform client; defaults to a fresh ``DiscordPlatform``
        registry: Command table; defaults to the built-in commands
        state: Session state; defaults to an empty session
    """

    def __init__(
        self,
        settings: BotSettings,
        client: PlatformClient | None = None,
        *,
        registry: CommandRegistry | None = None,
        state: BotState | None = None,
    ) -> None:
        if client is None:
            from jukebot.platform.discord_client import DiscordPlatform

            client = DiscordPlatform()

        self.settings = settings
        self.client = client
        self.catalog = Catalog(
            messages=settings.messages,
            preferences={PreferenceKey.COMMAND_PREFIX: settings.command_prefix},
        )
        self.registry = registry if registry is not None else default_registry()
        self._state = state if state is not None else BotState()
        self.phase = BotPhase.UNINITIALIZED

    # ------------------------------------------------------------------
    # Configuration, logging and state
    # ------------------------------------------------------------------

    def is_debug(self) -> bool:
        return bool(self.settings.debug)

    def logger(
        self,
        level: str,
        message: str,
        formatter: Callable[[], str] | None = None,
    ) -> None:
        """
        Log ``message`` prefixed with the label from ``formatter``.

        Debug output is dropped entirely unless ``is_debug()``; in that case
        neither the sink nor ``formatter`` is called. Unknown levels go to the
        default sink at INFO.
        """
        if level == LogLevel.DEBUG:
            if not self.is_debug():
                return
            sink = logger.debug
        elif level == LogLevel.INFO:
            sink = logger.info
        elif level == LogLevel.WARN:
            sink = logger.warning
        elif level == LogLevel.ERROR:
            sink = logger.error
        else:
            sink = partial(logger.log, logging.INFO)

        label = (formatter or self._label)()
        sink("%s %s", label, message)

    def _label(self) -> str:
        return f"[{self.settings.name}]"

    @property
    def state(self) -> dict[str, Any]:
        """Live session state; later ``set_state`` calls are visible through it."""
        return self._state.get()

    def set_state(self, patch: Mapping[str, Any]) -> None:
        self._state.set(patch)

    def reset_state(self) -> None:
        self._state.reset()

    # ------------------------------------------------------------------
    # Catalog and handlers
    # ------------------------------------------------------------------

    def get_message(self, key: str) -> str:
        return self.catalog.get_message(key)

    def get_preference(self, key: str) -> Any:
        return self.catalog.get_preference(key)

    def message_handler(self, key: str, message: discord.Message, *extra: Any) -> str:
        """
        Build the reply text for ``key`` in the context of ``message``.

        Context arguments (author mention, command prefix) are taken from
        ``MESSAGE_ARGUMENTS`` and come first; ``extra`` is appended after them.

        Raises:
            HandlerError: If ``key`` is not a message key or its template can't be filled
        """
        try:
            message_key = MessageKey(key)
        except ValueError:
            raise HandlerError("message", key) from None

        try:
            prefix = self.get_preference(PreferenceKey.COMMAND_PREFIX)
            args: list[Any] = []
            for source in MESSAGE_ARGUMENTS[message_key]:
                if source is MessageArg.AUTHOR:
                    args.append(message.author.mention)
                elif source is MessageArg.PREFIX:
                    args.append(prefix)
            return self.catalog.format_message(message_key, *args, *extra)
        except (CatalogLookupError, KeyError, IndexError, ValueError) as e:
            raise HandlerError("message", key) from e

    async def reply(self, key: str, message: discord.Message, *extra: Any) -> str:
        """Format ``key`` for ``message`` and send it to the message's channel."""
        text = self.message_handler(key, message, *extra)
        await message.channel.send(text)
        return text

    async def command_handler(self, command_key: str, args: list[str], message: discord.Message) -> Any:
        """
        Run the command registered under the canonical ``command_key``.

        Raises:
            HandlerError: If no command is registered under ``command_key``
        """
        descriptor = self.registry.get(command_key)
        if descriptor is None:
            raise HandlerError("command", command_key)
        return await descriptor.run(self, args, message)

    # ------------------------------------------------------------------
    # Platform events
    # ------------------------------------------------------------------

    async def on_ready(self) -> None:
        """
        Resolve the configured server and text channel and make the channel active.

        Raises:
            ServerConnectionError: If ``server_id`` is not a guild the client can see
            ChannelLookupError: If the guild has no text channel ``text_channel_id``
        """
        server_id = self.settings.server_id
        guild = self.client.get_guild(server_id) if server_id is not None else None
        if guild is None:
            raise ServerConnectionError(server_id)

        text_channel_id = self.settings.text_channel_id
        channel = next(
            (
                c for c in guild.channels
                if c.id == text_channel_id and c.type == discord.ChannelType.text
            ),
            None,
        )
        if channel is None:
            raise ChannelLookupError(text_channel_id)

        self.set_state({"active_text_channel": channel})
        self.phase = BotPhase.ACTIVE
        self.logger(LogLevel.INFO, f"Connected to server {server_id}, listening in #{channel.name}")

    async def on_message(self, message: discord.Message) -> None:
        """
        Route an incoming message.

        Ignored: the bot's own messages, anything before a text channel is
        active, and messages from other channels. A mention of the bot gets the
        mention reply; prefixed text is parsed as ``<alias> <args...>``.
        """
        if message.author.id == self.client.user.id:
            return

        active_channel = self.state.get("active_text_channel")
        if active_channel is None:
            return
        if getattr(message.channel, "name", None) != active_channel.name:
            return

        if self.client.user.mentioned_in(message):
            await self.reply(MessageKey.BOT_MENTIONED, message)
            return

        prefix = self.get_preference(PreferenceKey.COMMAND_PREFIX)
        content = message.content or ""
        if not content.startswith(prefix):
            return

        alias, *args = content[len(prefix):].split() or [""]
        command_key = self.registry.find_by_alias(alias)
        if command_key is None:
            self.logger(LogLevel.DEBUG, f"Unknown command {alias!r} from {message.author.id}")
            await self.reply(MessageKey.UNKNOWN_COMMAND, message)
            return

        self.logger(LogLevel.DEBUG, f"Dispatching {command_key} with args {args}")
        await self.command_handler(command_key, args, message)

    async def on_disconnect(self, error: Any) -> None:
        """
        Log the disconnect and raise. The facade cannot recover from this.

        Raises:
            DisconnectedError: Always
        """
        reason = getattr(error, "reason", None)
        code = getattr(error, "code", None)
        self.logger(
            LogLevel.ERROR,
            f"Bot was disconnected from server.\nReason: {reason}\nCode: {code}",
        )
        self.phase = BotPhase.DISCONNECTED
        raise DisconnectedError(reason, code)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def init(self) -> None:
        """
        Validate config, register the event handlers, then log in.

        Raises:
            ConfigError: For the first of token/server_id/text_channel_id that is missing
        """
        for field in REQUIRED_SETTINGS:
            value = getattr(self.settings, field, None)
            if value is None or value == "":
                raise ConfigError(field)

        self.client.on("ready", self.on_ready)
        self.client.on("message", self.on_message)
        self.client.on("disconnect", self.on_disconnect)
        self.phase = BotPhase.AWAITING_READY

        self.logger(LogLevel.DEBUG, f"Logging in to server {self.settings.server_id}")
        await self.client.login(self.settings.token)
