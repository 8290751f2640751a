"""
Track queue commands: queue, skip, nowplaying and clear.

The queue is a list of track titles in state. Updates always build a new list
and merge it in with ``set_state`` rather than mutating the stored one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jukebot.bot.catalog import MessageKey
from jukebot.config.logging import LogLevel

if TYPE_CHECKING:
    import discord

    from jukebot.bot.client import MusicBot


def _queue(bot: MusicBot) -> list[str]:
    return list(bot.state.get("queue") or [])


async def queue_command(bot: MusicBot, args: list[str], message: discord.Message) -> str:
    """
    ``queue <title...>`` appends a track; bare ``queue`` lists what's up next.
    """
    queue = _queue(bot)

    if args:
        track = " ".join(args)
        queue.append(track)
        bot.set_state({"queue": queue})
        bot.logger(LogLevel.DEBUG, f"Queued {track!r} at position {len(queue)}")
        return await bot.reply(MessageKey.TRACK_QUEUED, message, track, len(queue))

    if not queue:
        return await bot.reply(MessageKey.QUEUE_EMPTY, message)

    listing = "\n".join(f"{position}. {track}" for position, track in enumerate(queue, start=1))
    return await bot.reply(MessageKey.QUEUE_LIST, message, listing)


async def skip_command(bot: MusicBot, args: list[str], message: discord.Message) -> str:
    """Move the head of the queue into ``current_track``."""
    queue = _queue(bot)
    if not queue:
        bot.set_state({"current_track": None})
        return await bot.reply(MessageKey.QUEUE_EMPTY, message)

    track, *rest = queue
    bot.set_state({"current_track": track, "queue": rest})
    return await bot.reply(MessageKey.NOW_PLAYING, message, track)


async def now_playing_command(bot: MusicBot, args: list[str], message: discord.Message) -> str:
    track = bot.state.get("current_track")
    if track is None:
        return await bot.reply(MessageKey.NOTHING_PLAYING, message)
    return await bot.reply(MessageKey.NOW_PLAYING, message, track)


async def clear_command(bot: MusicBot, args: list[str], message: discord.Message) -> str:
    # Active channels survive; only playback bookkeeping is dropped
    bot.set_state({"queue": [], "current_track": None})
    return await bot.reply(MessageKey.QUEUE_CLEARED, message)
