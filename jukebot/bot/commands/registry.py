"""
Command registry.

Maps each canonical ``CommandKey`` to a ``CommandDescriptor``. Two lookups are
offered and they fail differently:

- ``get(key)`` is the direct, programmatic lookup used by
  ``MusicBot.command_handler``; a miss there is a wiring bug.
- ``find_by_alias(alias)`` resolves user text; a miss is ordinary and the bot
  answers with the unknown-command message.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import discord

    from jukebot.bot.client import MusicBot


class CommandKey(StrEnum):
    HELP = "help"
    PING = "ping"
    JOIN = "join"
    LEAVE = "leave"
    QUEUE = "queue"
    SKIP = "skip"
    NOW_PLAYING = "now_playing"
    CLEAR = "clear"


CommandRun = Callable[["MusicBot", list[str], "discord.Message"], Awaitable[Any]]


@dataclass(frozen=True)
class CommandDescriptor:
    """A command's aliases (first one is shown in help), handler and help text."""

    aliases: tuple[str, ...]
    run: CommandRun
    description: str = ""


class CommandRegistry:
    """
    Read-only table of commands.

    Args:
        commands: Descriptors keyed by canonical command key

    Raises:
        ValueError: If a descriptor has no aliases or an alias is claimed twice
    """

    def __init__(self, commands: Mapping[CommandKey, CommandDescriptor]) -> None:
        self._commands: dict[CommandKey, CommandDescriptor] = dict(commands)
        self._aliases: dict[str, CommandKey] = {}
        for key, descriptor in self._commands.items():
            if not descriptor.aliases:
                raise ValueError(f"Command '{key}' has no aliases")
            for alias in descriptor.aliases:
                if alias in self._aliases:
                    raise ValueError(
                        f"Alias '{alias}' is used by both '{self._aliases[alias]}' and '{key}'"
                    )
                self._aliases[alias] = key

    def get(self, key: str) -> CommandDescriptor | None:
        try:
            return self._commands.get(key)
        except TypeError:
            return None

    def find_by_alias(self, alias: str) -> CommandKey | None:
        """Exact, case-sensitive alias match."""
        return self._aliases.get(alias)

    def __iter__(self) -> Iterator[tuple[CommandKey, CommandDescriptor]]:
        return iter(self._commands.items())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None  # type: ignore[arg-type]
