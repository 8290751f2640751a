"""
Platform clients.

The bot core talks to the chat service only through ``PlatformClient``;
``DiscordPlatform`` is the discord.py implementation used in production.
"""

from jukebot.platform.base import EVENTS, PlatformClient
from jukebot.platform.discord_client import DisconnectInfo, DiscordPlatform

__all__ = ["EVENTS", "DisconnectInfo", "DiscordPlatform", "PlatformClient"]
