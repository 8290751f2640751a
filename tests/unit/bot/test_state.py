"""
Tests for BotState: shallow merge, live view and reset-to-default.
"""

from jukebot.bot.state import DEFAULT_STATE, BotState


class TestBotState:
    def test_starts_from_default_mapping(self):
        assert BotState().get() == DEFAULT_STATE

    def test_custom_default(self):
        assert BotState({"volume": 3}).get() == {"volume": 3}

    def test_empty_default(self):
        assert BotState({}).get() == {}

    def test_set_overwrites_and_preserves(self):
        state = BotState({"a": 1, "b": 2})
        state.set({"b": 20, "c": 30})
        assert state.get() == {"a": 1, "b": 20, "c": 30}

    def test_set_is_shallow(self):
        """Nested values are replaced wholesale, not merged."""
        state = BotState({"nested": {"x": 1, "y": 2}})
        state.set({"nested": {"x": 10}})
        assert state.get() == {"nested": {"x": 10}}

    def test_get_is_a_live_view(self):
        state = BotState({})
        view = state.get()
        state.set({"a": 1})
        assert view["a"] == 1

    def test_reset_restores_default(self):
        state = BotState({"queue": [], "track": None})
        state.set({"track": "x", "extra": True})
        state.reset()
        assert state.get() == {"queue": [], "track": None}

    def test_in_place_mutation_does_not_reach_default(self):
        state = BotState()
        state.get()["queue"].append("song")
        state.reset()
        assert state.get()["queue"] == []

        state.get()["queue"].append("again")
        state.reset()
        assert state.get()["queue"] == []

    def test_caller_default_is_copied(self):
        default = {"queue": []}
        state = BotState(default)
        state.get()["queue"].append("song")
        default["queue"].append("from caller")
        state.reset()
        assert state.get() == {"queue": []}

    def test_module_default_is_not_mutated(self):
        state = BotState()
        state.get()["queue"].append("song")
        assert DEFAULT_STATE["queue"] == []
