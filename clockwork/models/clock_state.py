"""
Data model for the clock display state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TextColor(Enum):
    """Foreground colors selectable at runtime. Values are Tk color strings."""

    DEFAULT = ""  # theme default foreground
    RED = "red"
    CYAN = "cyan"
    BLACK = "black"


@dataclass
class ClockState:
    """
    State rendered by the clock label.

    Attributes:
        use_12h (bool): 12-hour clock with AM/PM if True, 24-hour if False.
        text_color (TextColor): Current foreground color.
        current_text (str): Last formatted time; owned by ClockDisplayModel.
    """
    use_12h: bool = True
    text_color: TextColor = TextColor.DEFAULT
    current_text: str = ""
