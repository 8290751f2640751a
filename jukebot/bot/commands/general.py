"""
General commands: help and ping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jukebot.bot.catalog import MessageKey

if TYPE_CHECKING:
    import discord

    from jukebot.bot.client import MusicBot


async def help_command(bot: MusicBot, args: list[str], message: discord.Message) -> str:
    """
    List every registered command as ``<prefix><first alias> - <description>``.

    Arguments are ignored.
    """
    lines = [bot.message_handler(MessageKey.HELP_HEADER, message)]
    for _key, descriptor in bot.registry:
        lines.append(
            bot.message_handler(
                MessageKey.HELP_ENTRY, message, descriptor.aliases[0], descriptor.description
            )
        )
    text = "\n".join(lines)
    await message.channel.send(text)
    return text


async def ping_command(bot: MusicBot, args: list[str], message: discord.Message) -> str:
    return await bot.reply(MessageKey.PONG, message)
