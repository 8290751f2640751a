"""
Voice channel bookkeeping: join and leave.

Audio is not streamed; these commands only track which voice channel the
session is attached to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jukebot.bot.catalog import MessageKey

if TYPE_CHECKING:
    import discord

    from jukebot.bot.client import MusicBot


async def join_command(bot: MusicBot, args: list[str], message: discord.Message) -> str:
    """Attach the session to the voice channel the invoking member is in."""
    # Plain users (e.g. in DMs) have no voice attribute at all
    voice = getattr(message.author, "voice", None)
    channel = voice.channel if voice is not None else None
    if channel is None:
        return await bot.reply(MessageKey.NOT_IN_VOICE, message)

    bot.set_state({"active_voice_channel": channel})
    return await bot.reply(MessageKey.VOICE_JOINED, message, channel.name)


async def leave_command(bot: MusicBot, args: list[str], message: discord.Message) -> str:
    channel = bot.state.get("active_voice_channel")
    if channel is None:
        return await bot.reply(MessageKey.NOT_IN_VOICE_BOT, message)

    bot.set_state({"active_voice_channel": None})
    return await bot.reply(MessageKey.VOICE_LEFT, message, channel.name)
