"""
ClockDisplayModel
-----------------
Owns the ClockState and every mutation of it. The view and its callbacks
hold a reference to one model instance; renderers subscribe for changes.

Rules:
- `current_text` is recomputed on every tick and synchronously on every
  format change, so a format switch never waits for the next tick.
- The text is computed once during construction; it is never blank.
- Everything runs on the Tk main loop, so no locking is needed.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..models.clock_state import ClockState, TextColor
from .clock_service import ClockService
from .key_actions import KeyAction, resolve_key

logger = logging.getLogger(__name__)

ClockListener = Callable[[ClockState], None]

_COLOR_ACTIONS = {
    KeyAction.COLOR_RED: TextColor.RED,
    KeyAction.COLOR_CYAN: TextColor.CYAN,
    KeyAction.COLOR_BLACK: TextColor.BLACK,
}


class ClockDisplayModel:
    """Clock state plus the operations buttons, keys and the timer call into."""

    def __init__(self, service: Optional[ClockService] = None, *, use_12h: bool = True) -> None:
        self._svc = service or ClockService()
        self._state = ClockState(use_12h=use_12h)
        self._listeners: List[ClockListener] = []
        self.tick()

    # --- Read access ----------------------------------------------------------

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def current_text(self) -> str:
        return self._state.current_text

    @property
    def use_12h(self) -> bool:
        return self._state.use_12h

    @property
    def text_color(self) -> TextColor:
        return self._state.text_color

    # --- Observers ------------------------------------------------------------

    def subscribe(self, listener: ClockListener) -> None:
        """Registers `listener` and immediately hands it the current state."""
        if listener not in self._listeners:
            self._listeners.append(listener)
        listener(self._state)

    def unsubscribe(self, listener: ClockListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)

    # --- Operations -----------------------------------------------------------

    def tick(self) -> str:
        """Recomputes the displayed text from the current time."""
        self._state.current_text = self._svc.format(self._state.use_12h)
        self._notify()
        return self._state.current_text

    def set_format_12(self) -> None:
        self._set_format(True)

    def set_format_24(self) -> None:
        self._set_format(False)

    def _set_format(self, use_12h: bool) -> None:
        if self._state.use_12h != use_12h:
            logger.info(f"Clock format switched to {'12h' if use_12h else '24h'}")
        self._state.use_12h = use_12h
        self.tick()

    def set_text_color(self, color: TextColor) -> None:
        logger.debug(f"Text color set to {color.name}")
        self._state.text_color = color
        self._notify()

    def handle_key(self, keysym: str) -> bool:
        """
        Applies the shortcut bound to a Tk key symbol.

        Returns:
            bool: True if the key has a shortcut, False if it was ignored.
        """
        action = resolve_key(keysym)
        if action is None:
            return False
        if action is KeyAction.FORMAT_12H:
            self.set_format_12()
        elif action is KeyAction.FORMAT_24H:
            self.set_format_24()
        else:
            self.set_text_color(_COLOR_ACTIONS[action])
        return True
