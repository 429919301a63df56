"""Keyboard shortcuts of the clock view, keyed by Tk key symbol."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class KeyAction(Enum):
    COLOR_RED = "color_red"
    COLOR_CYAN = "color_cyan"
    COLOR_BLACK = "color_black"
    FORMAT_12H = "format_12h"
    FORMAT_24H = "format_24h"


KEY_ACTIONS: Dict[str, KeyAction] = {
    "Up": KeyAction.COLOR_RED,
    "Down": KeyAction.COLOR_CYAN,
    "Return": KeyAction.COLOR_BLACK,
    "KP_Enter": KeyAction.COLOR_BLACK,
    "Left": KeyAction.FORMAT_12H,
    "Right": KeyAction.FORMAT_24H,
}


def resolve_key(keysym: str) -> Optional[KeyAction]:
    """Returns the action bound to `keysym`, or None for keys without a shortcut."""
    return KEY_ACTIONS.get(keysym)
