"""
Bot core.

Catalog, command registry, session state and the ``MusicBot`` facade that
routes platform events between them.
"""

from jukebot.bot.client import BotPhase, MusicBot

__all__ = ["BotPhase", "MusicBot"]
