"""
Tests for CommandRegistry and the built-in command table.
"""

from unittest.mock import AsyncMock

import pytest

from jukebot.bot.commands import COMMANDS, CommandDescriptor, CommandKey, CommandRegistry, default_registry


class TestCommandRegistry:
    def test_get_by_canonical_key(self):
        registry = default_registry()
        assert registry.get(CommandKey.HELP) is COMMANDS[CommandKey.HELP]
        assert registry.get("help") is COMMANDS[CommandKey.HELP]

    def test_get_unknown_key_returns_none(self):
        registry = default_registry()
        assert registry.get("unknown") is None
        assert registry.get(["not", "hashable"]) is None

    @pytest.mark.parametrize(
        "alias, key",
        [
            ("help", CommandKey.HELP),
            ("h", CommandKey.HELP),
            ("q", CommandKey.QUEUE),
            ("np", CommandKey.NOW_PLAYING),
            ("stop", CommandKey.CLEAR),
        ],
    )
    def test_find_by_alias(self, alias, key):
        assert default_registry().find_by_alias(alias) is key

    def test_canonical_key_is_not_implicitly_an_alias(self):
        """``now_playing`` is the key; users type ``nowplaying`` or ``np``."""
        assert default_registry().find_by_alias("now_playing") is None

    def test_alias_lookup_is_exact(self):
        registry = default_registry()
        assert registry.find_by_alias("Help") is None
        assert registry.find_by_alias(" help") is None
        assert registry.find_by_alias("") is None

    def test_duplicate_alias_rejected(self):
        run = AsyncMock()
        with pytest.raises(ValueError, match="'go'"):
            CommandRegistry({
                CommandKey.PING: CommandDescriptor(aliases=("ping", "go"), run=run),
                CommandKey.SKIP: CommandDescriptor(aliases=("skip", "go"), run=run),
            })

    def test_command_without_aliases_rejected(self):
        with pytest.raises(ValueError):
            CommandRegistry({CommandKey.PING: CommandDescriptor(aliases=(), run=AsyncMock())})

    def test_iteration_preserves_table_order(self):
        assert [key for key, _ in default_registry()] == list(COMMANDS)
        assert len(default_registry()) == len(COMMANDS)

    def test_contains(self):
        registry = default_registry()
        assert CommandKey.JOIN in registry
        assert "nope" not in registry


class TestBuiltinTable:
    def test_every_command_key_is_registered(self):
        assert set(COMMANDS) == set(CommandKey)

    def test_every_command_has_a_description(self):
        assert all(descriptor.description for descriptor in COMMANDS.values())
