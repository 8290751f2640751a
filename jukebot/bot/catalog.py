"""
Message and preference catalog.

Both tables are closed: keys are ``StrEnum`` members, so every template and
preference the bot can ask for is enumerable up front. Templates use ``{}``
placeholders that are filled positionally with ``str.format``.

``MESSAGE_ARGUMENTS`` records which context values each template takes first
(the invoking user's mention, the command prefix); callers may append further
positional values after those.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, StrEnum
from typing import Any

from jukebot.bot.errors import CatalogLookupError


class MessageKey(StrEnum):
    BOT_MENTIONED = "bot_mentioned"
    UNKNOWN_COMMAND = "unknown_command"
    HELP_HEADER = "help_header"
    HELP_ENTRY = "help_entry"
    PONG = "pong"
    VOICE_JOINED = "voice_joined"
    VOICE_LEFT = "voice_left"
    NOT_IN_VOICE = "not_in_voice"
    NOT_IN_VOICE_BOT = "not_in_voice_bot"
    TRACK_QUEUED = "track_queued"
    QUEUE_LIST = "queue_list"
    QUEUE_EMPTY = "queue_empty"
    QUEUE_CLEARED = "queue_cleared"
    NOW_PLAYING = "now_playing"
    NOTHING_PLAYING = "nothing_playing"


class PreferenceKey(StrEnum):
    COMMAND_PREFIX = "command_prefix"


class MessageArg(Enum):
    """Context values a template can be filled with before any extra arguments."""

    AUTHOR = "author"
    PREFIX = "prefix"


DEFAULT_MESSAGES: dict[MessageKey, str] = {
    MessageKey.BOT_MENTIONED: "Hey {}, you should try `{}help` for a list of commands. :thumbsup:",
    MessageKey.UNKNOWN_COMMAND: "Sorry, I don't know that one. Try `{}help` for a list of commands.",
    MessageKey.HELP_HEADER: "Here's what I can do, {}:",
    MessageKey.HELP_ENTRY: "`{}{}` - {}",
    MessageKey.PONG: "Pong! :ping_pong:",
    MessageKey.VOICE_JOINED: "Joined **{}**. :loud_sound:",
    MessageKey.VOICE_LEFT: "Left **{}**. :wave:",
    MessageKey.NOT_IN_VOICE: "{}, you need to be in a voice channel first.",
    MessageKey.NOT_IN_VOICE_BOT: "I'm not in a voice channel.",
    MessageKey.TRACK_QUEUED: "{} added **{}** to the queue (position {}).",
    MessageKey.QUEUE_LIST: "Up next:\n{}",
    MessageKey.QUEUE_EMPTY: "The queue is empty. Add something with `{}queue <track>`.",
    MessageKey.QUEUE_CLEARED: "Cleared the queue. :wastebasket:",
    MessageKey.NOW_PLAYING: "Now playing: **{}**",
    MessageKey.NOTHING_PLAYING: "Nothing is playing right now.",
}

MESSAGE_ARGUMENTS: dict[MessageKey, tuple[MessageArg, ...]] = {
    MessageKey.BOT_MENTIONED: (MessageArg.AUTHOR, MessageArg.PREFIX),
    MessageKey.UNKNOWN_COMMAND: (MessageArg.PREFIX,),
    MessageKey.HELP_HEADER: (MessageArg.AUTHOR,),
    MessageKey.HELP_ENTRY: (MessageArg.PREFIX,),
    MessageKey.PONG: (),
    MessageKey.VOICE_JOINED: (),
    MessageKey.VOICE_LEFT: (),
    MessageKey.NOT_IN_VOICE: (MessageArg.AUTHOR,),
    MessageKey.NOT_IN_VOICE_BOT: (),
    MessageKey.TRACK_QUEUED: (MessageArg.AUTHOR,),
    MessageKey.QUEUE_LIST: (),
    MessageKey.QUEUE_EMPTY: (MessageArg.PREFIX,),
    MessageKey.QUEUE_CLEARED: (),
    MessageKey.NOW_PLAYING: (),
    MessageKey.NOTHING_PLAYING: (),
}

DEFAULT_PREFERENCES: dict[PreferenceKey, Any] = {
    PreferenceKey.COMMAND_PREFIX: "!",
}


class Catalog:
    """
    Read-only lookup of message templates and preferences.

    Args:
        messages: Template overrides keyed by message key (value or member)
        preferences: Preference overrides keyed by preference key

    Raises:
        ValueError: If an override names a key that does not exist
    """

    def __init__(
        self,
        messages: Mapping[str, str] | None = None,
        preferences: Mapping[str, Any] | None = None,
    ) -> None:
        self._messages: dict[MessageKey, str] = dict(DEFAULT_MESSAGES)
        self._messages.update({MessageKey(k): v for k, v in (messages or {}).items()})
        self._preferences: dict[PreferenceKey, Any] = dict(DEFAULT_PREFERENCES)
        self._preferences.update({PreferenceKey(k): v for k, v in (preferences or {}).items()})

    def get_message(self, key: str) -> str:
        """Return the unfilled template for ``key``."""
        try:
            return self._messages[key]
        except (KeyError, TypeError):
            raise CatalogLookupError("message", key) from None

    def get_preference(self, key: str) -> Any:
        """Return the preference value for ``key``."""
        try:
            return self._preferences[key]
        except (KeyError, TypeError):
            raise CatalogLookupError("preference", key) from None

    def format_message(self, key: str, *args: Any) -> str:
        """Fill the template for ``key`` left to right with ``args``."""
        return self.get_message(key).format(*args)
