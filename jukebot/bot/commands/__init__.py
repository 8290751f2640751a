"""
Built-in prefix commands.

``COMMANDS`` is the closed table of everything the bot understands; it is
loaded once and wrapped in a ``CommandRegistry`` per bot instance.
"""

from jukebot.bot.commands.general import help_command, ping_command
from jukebot.bot.commands.queue import (
    clear_command,
    now_playing_command,
    queue_command,
    skip_command,
)
from jukebot.bot.commands.registry import (
    CommandDescriptor,
    CommandKey,
    CommandRegistry,
    CommandRun,
)
from jukebot.bot.commands.voice import join_command, leave_command

COMMANDS: dict[CommandKey, CommandDescriptor] = {
    CommandKey.HELP: CommandDescriptor(
        aliases=("help", "commands", "h"),
        run=help_command,
        description="Show this list of commands",
    ),
    CommandKey.PING: CommandDescriptor(
        aliases=("ping",),
        run=ping_command,
        description="Check that the bot is listening",
    ),
    CommandKey.JOIN: CommandDescriptor(
        aliases=("join", "summon"),
        run=join_command,
        description="Attach the session to your voice channel",
    ),
    CommandKey.LEAVE: CommandDescriptor(
        aliases=("leave", "disconnect"),
        run=leave_command,
        description="Detach from the voice channel",
    ),
    CommandKey.QUEUE: CommandDescriptor(
        aliases=("queue", "q", "add"),
        run=queue_command,
        description="Add a track (`queue <title>`) or list the queue",
    ),
    CommandKey.SKIP: CommandDescriptor(
        aliases=("skip", "next"),
        run=skip_command,
        description="Play the next track in the queue",
    ),
    CommandKey.NOW_PLAYING: CommandDescriptor(
        aliases=("nowplaying", "np"),
        run=now_playing_command,
        description="Show the current track",
    ),
    CommandKey.CLEAR: CommandDescriptor(
        aliases=("clear", "stop"),
        run=clear_command,
        description="Empty the queue and stop the current track",
    ),
}


def default_registry() -> CommandRegistry:
    """Registry over the built-in ``COMMANDS`` table."""
    return CommandRegistry(COMMANDS)


__all__ = [
    "COMMANDS",
    "CommandDescriptor",
    "CommandKey",
    "CommandRegistry",
    "CommandRun",
    "default_registry",
]
