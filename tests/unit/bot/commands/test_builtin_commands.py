"""
Tests for the built-in commands, run through MusicBot.command_handler.

Each test drives a real MusicBot (mock platform client) and asserts on the
state it leaves behind and the text it sends to the channel.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from jukebot.bot.client import MusicBot
from jukebot.bot.commands import COMMANDS, CommandKey
from jukebot.config.settings import BotSettings
from jukebot.platform.base import PlatformClient


def _make_bot() -> MusicBot:
    client = MagicMock(spec=PlatformClient)
    client.user = MagicMock(id=123)
    return MusicBot(BotSettings(), client)


def _make_message(voice_channel_name: str | None = None) -> MagicMock:
    message = MagicMock()
    message.author.id = 456
    message.author.mention = "<@456>"
    message.channel.send = AsyncMock()
    if voice_channel_name is None:
        message.author.voice = None
    else:
        message.author.voice.channel.name = voice_channel_name
    return message


def _sent(message: MagicMock) -> str:
    return message.channel.send.call_args[0][0]


class TestHelpCommand:
    @pytest.mark.asyncio
    async def test_lists_every_command_with_prefix(self):
        bot = _make_bot()
        message = _make_message()

        text = await bot.command_handler(CommandKey.HELP, [], message)

        assert text == _sent(message)
        lines = text.splitlines()
        assert lines[0] == "Here's what I can do, <@456>:"
        assert len(lines) == len(COMMANDS) + 1
        assert "`!queue` - Add a track (`queue <title>`) or list the queue" in lines

    @pytest.mark.asyncio
    async def test_ignores_arguments(self):
        bot = _make_bot()
        with_args, without_args = _make_message(), _make_message()

        await bot.command_handler(CommandKey.HELP, ["extra"], with_args)
        await bot.command_handler(CommandKey.HELP, [], without_args)

        assert _sent(with_args) == _sent(without_args)


class TestPingCommand:
    @pytest.mark.asyncio
    async def test_replies_pong(self):
        bot = _make_bot()
        message = _make_message()

        await bot.command_handler(CommandKey.PING, [], message)

        message.channel.send.assert_awaited_once_with("Pong! :ping_pong:")


class TestVoiceCommands:
    @pytest.mark.asyncio
    async def test_join_stores_authors_voice_channel(self):
        bot = _make_bot()
        message = _make_message(voice_channel_name="Lounge")

        await bot.command_handler(CommandKey.JOIN, [], message)

        assert bot.state["active_voice_channel"] is message.author.voice.channel
        assert _sent(message) == "Joined **Lounge**. :loud_sound:"

    @pytest.mark.asyncio
    async def test_join_without_voice_leaves_state_alone(self):
        bot = _make_bot()
        message = _make_message()

        await bot.command_handler(CommandKey.JOIN, [], message)

        assert bot.state["active_voice_channel"] is None
        assert _sent(message) == "<@456>, you need to be in a voice channel first."

    @pytest.mark.asyncio
    async def test_join_from_user_without_voice_attribute(self):
        bot = _make_bot()
        message = _make_message()
        message.author = MagicMock(spec=["id", "mention"])
        message.author.mention = "<@456>"

        await bot.command_handler(CommandKey.JOIN, [], message)

        assert bot.state["active_voice_channel"] is None

    @pytest.mark.asyncio
    async def test_leave_clears_voice_channel(self):
        bot = _make_bot()
        await bot.command_handler(CommandKey.JOIN, [], _make_message(voice_channel_name="Lounge"))
        message = _make_message()

        await bot.command_handler(CommandKey.LEAVE, [], message)

        assert bot.state["active_voice_channel"] is None
        assert _sent(message) == "Left **Lounge**. :wave:"

    @pytest.mark.asyncio
    async def test_leave_when_not_joined(self):
        bot = _make_bot()
        message = _make_message()

        await bot.command_handler(CommandKey.LEAVE, [], message)

        assert _sent(message) == "I'm not in a voice channel."


class TestQueueCommands:
    @pytest.mark.asyncio
    async def test_queue_appends_joined_title(self):
        bot = _make_bot()
        message = _make_message()

        await bot.command_handler(CommandKey.QUEUE, ["Bohemian", "Rhapsody"], message)
        await bot.command_handler(CommandKey.QUEUE, ["Africa"], _make_message())

        assert bot.state["queue"] == ["Bohemian Rhapsody", "Africa"]
        assert _sent(message) == "<@456> added **Bohemian Rhapsody** to the queue (position 1)."

    @pytest.mark.asyncio
    async def test_queue_replaces_list_instead_of_mutating(self):
        bot = _make_bot()
        before = bot.state["queue"]

        await bot.command_handler(CommandKey.QUEUE, ["Song"], _make_message())

        assert before == []
        assert bot.state["queue"] == ["Song"]

    @pytest.mark.asyncio
    async def test_bare_queue_lists_tracks(self):
        bot = _make_bot()
        bot.set_state({"queue": ["One", "Two"]})
        message = _make_message()

        await bot.command_handler(CommandKey.QUEUE, [], message)

        assert _sent(message) == "Up next:\n1. One\n2. Two"

    @pytest.mark.asyncio
    async def test_bare_queue_when_empty(self):
        bot = _make_bot()
        message = _make_message()

        await bot.command_handler(CommandKey.QUEUE, [], message)

        assert _sent(message) == "The queue is empty. Add something with `!queue <track>`."

    @pytest.mark.asyncio
    async def test_skip_moves_head_to_current_track(self):
        bot = _make_bot()
        bot.set_state({"queue": ["One", "Two"]})
        message = _make_message()

        await bot.command_handler(CommandKey.SKIP, [], message)

        assert bot.state["current_track"] == "One"
        assert bot.state["queue"] == ["Two"]
        assert _sent(message) == "Now playing: **One**"

    @pytest.mark.asyncio
    async def test_skip_on_empty_queue_stops_playback(self):
        bot = _make_bot()
        bot.set_state({"current_track": "Old"})
        message = _make_message()

        await bot.command_handler(CommandKey.SKIP, [], message)

        assert bot.state["current_track"] is None
        assert "queue is empty" in _sent(message)

    @pytest.mark.asyncio
    async def test_now_playing(self):
        bot = _make_bot()
        idle, playing = _make_message(), _make_message()

        await bot.command_handler(CommandKey.NOW_PLAYING, [], idle)
        bot.set_state({"current_track": "Africa"})
        await bot.command_handler(CommandKey.NOW_PLAYING, [], playing)

        assert _sent(idle) == "Nothing is playing right now."
        assert _sent(playing) == "Now playing: **Africa**"

    @pytest.mark.asyncio
    async def test_clear_keeps_active_channels(self):
        bot = _make_bot()
        text_channel, voice_channel = MagicMock(), MagicMock()
        bot.set_state({
            "active_text_channel": text_channel,
            "active_voice_channel": voice_channel,
            "current_track": "One",
            "queue": ["Two"],
        })
        message = _make_message()

        await bot.command_handler(CommandKey.CLEAR, [], message)

        assert bot.state["queue"] == []
        assert bot.state["current_track"] is None
        assert bot.state["active_text_channel"] is text_channel
        assert bot.state["active_voice_channel"] is voice_channel
        assert _sent(message) == "Cleared the queue. :wastebasket:"
