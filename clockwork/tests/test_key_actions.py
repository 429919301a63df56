"""Key symbol to shortcut mapping."""
from __future__ import annotations

import pytest

from clockwork.logic.key_actions import KEY_ACTIONS, KeyAction, resolve_key


@pytest.mark.parametrize(
    "keysym, action",
    [
        ("Up", KeyAction.COLOR_RED),
        ("Down", KeyAction.COLOR_CYAN),
        ("Return", KeyAction.COLOR_BLACK),
        ("KP_Enter", KeyAction.COLOR_BLACK),
        ("Left", KeyAction.FORMAT_12H),
        ("Right", KeyAction.FORMAT_24H),
    ],
)
def test_known_keys(keysym: str, action: KeyAction) -> None:
    assert resolve_key(keysym) is action


@pytest.mark.parametrize("keysym", ["a", "space", "Escape", "up", ""])
def test_other_keys_are_ignored(keysym: str) -> None:
    assert resolve_key(keysym) is None


def test_every_action_has_a_key() -> None:
    assert set(KEY_ACTIONS.values()) == set(KeyAction)
