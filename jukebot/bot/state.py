"""
Session state container.

Holds the transient facts of the single active session (text/voice channel,
current track, queue). Owned by the ``MusicBot`` instance and handed to every
command by reference; there is no module-level state.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

DEFAULT_STATE: dict[str, Any] = {
    "active_text_channel": None,
    "active_voice_channel": None,
    "current_track": None,
    "queue": [],
}


class BotState:
    """
    Mutable string-keyed mapping with shallow merge and reset-to-default.

    The default is deep-copied on construction and again on every reset, so
    mutating live state (including nested lists) never reaches the snapshot.
    """

    def __init__(self, default: Mapping[str, Any] | None = None) -> None:
        source = DEFAULT_STATE if default is None else default
        self._default: dict[str, Any] = copy.deepcopy(dict(source))
        self._state: dict[str, Any] = copy.deepcopy(self._default)

    def get(self) -> dict[str, Any]:
        """Return the live mapping (not a copy)."""
        return self._state

    def set(self, patch: Mapping[str, Any]) -> None:
        """Shallow-merge ``patch``; its values win, absent keys are kept."""
        self._state.update(patch)

    def reset(self) -> None:
        self._state = copy.deepcopy(self._default)

    def __repr__(self) -> str:
        return f"BotState({self._state!r})"
