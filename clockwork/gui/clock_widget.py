"""
ClockLabel (Tkinter)
--------------------
Large time label that mirrors a ClockDisplayModel.

The label draws nothing on its own: it subscribes to the model and
reconfigures text and foreground whenever the state changes.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Tuple

from ..logic.clock_model import ClockDisplayModel
from ..models.clock_state import ClockState


class ClockLabel(ttk.Label):
    """Renders `current_text` in `text_color`."""

    def __init__(self, parent: tk.Misc, model: ClockDisplayModel, *, font: Tuple[str, int] = ("Arial", 30)) -> None:
        super().__init__(parent, anchor="center", font=font)
        self._model = model
        self._model.subscribe(self._render)

    def _render(self, state: ClockState) -> None:
        self.configure(text=state.current_text, foreground=state.text_color.value)

    def destroy(self) -> None:
        self._model.unsubscribe(self._render)
        super().destroy()
