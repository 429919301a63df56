"""
Clockwork – main view.
Shows the digital clock with a 12h/24h button bar underneath.

Conventions:
- The view owns the ClockDisplayModel; buttons, keys and the timer only call
  into that one instance.
- Keyboard shortcuts are bound on a per-view bindtag that the toplevel and
  the view widgets carry, so they work without focus on a particular widget.
- The repeating tick is cancelled when the view is destroyed.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from pathlib import Path
from typing import List, Optional

from PIL import ImageTk

from ..logic.clock_model import ClockDisplayModel
from ..logic.clock_service import ClockService
from ..logic.icon_loader import IconLoader
from ..logic.repeating_task import RepeatingTask
from ..models.clockwork_settings import ClockworkSettings
from .clock_widget import ClockLabel

logger = logging.getLogger(__name__)


class ClockworkView(ttk.Frame):
    """Clock in the center, format buttons at the bottom."""

    def __init__(
        self,
        parent: tk.Misc,
        settings: Optional[ClockworkSettings] = None,
        *,
        model: Optional[ClockDisplayModel] = None,
        asset_dir: Optional[Path] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or ClockworkSettings()
        self.model = model or ClockDisplayModel(
            ClockService(self._settings.timezone), use_12h=self._settings.use_12h
        )
        self._icons = IconLoader(asset_dir or Path.cwd(), self._settings.icon_size)
        # PhotoImages must stay referenced or Tk drops them
        self._photos: List[ImageTk.PhotoImage] = []

        # --- UI --------------------------------------------------------
        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)

        self.clock = ClockLabel(self, self.model, font=self._settings.font())
        self.clock.grid(row=0, column=0, sticky="nsew")

        self.button_bar = tk.Frame(
            self,
            highlightbackground=self._settings.border_color,
            highlightcolor=self._settings.border_color,
            highlightthickness=1,
        )
        self.button_bar.grid(row=1, column=0, sticky="ew")
        inner = ttk.Frame(self.button_bar)
        inner.pack(anchor="s")

        self.btn_12h = self._make_button(inner, self._settings.label_12h,
                                         self._settings.icon_12h, self.model.set_format_12)
        self.btn_24h = self._make_button(inner, self._settings.label_24h,
                                         self._settings.icon_24h, self.model.set_format_24)
        self.btn_12h.grid(row=0, column=0, padx=(0, self._settings.button_spacing))
        self.btn_24h.grid(row=0, column=1)

        # Own bindtag on the toplevel and on our widgets; removing it leaves
        # other <KeyPress> bindings of the window untouched
        self._key_tag = f"ClockworkKeys{id(self)}"
        self._key_binding = self.bind_class(self._key_tag, "<KeyPress>", self._on_key)
        for widget in (self.winfo_toplevel(), self, self.clock, self.button_bar, inner,
                       self.btn_12h, self.btn_24h):
            self._add_key_tag(widget)

        # Start ticking
        self._task = RepeatingTask(self, self._settings.tick_interval_ms, self.model.tick)
        self._task.start()

    # ------------------------------------------------------------------ #
    def _make_button(self, parent: tk.Misc, text: str, icon: Path, command) -> ttk.Button:
        photo = ImageTk.PhotoImage(self._icons.load(icon), master=self)
        self._photos.append(photo)
        return ttk.Button(parent, text=text, image=photo, compound="left", command=command)

    def _add_key_tag(self, widget: tk.Misc) -> None:
        tags = list(widget.bindtags())
        if self._key_tag not in tags:
            tags.insert(1, self._key_tag)
            widget.bindtags(tuple(tags))

    def _on_key(self, event: tk.Event) -> None:
        if not self.model.handle_key(event.keysym):
            logger.debug(f"No shortcut for key {event.keysym!r}")

    def destroy(self) -> None:
        self._task.cancel()
        if self._key_binding is not None:
            top = self.winfo_toplevel()
            top.bindtags(tuple(t for t in top.bindtags() if t != self._key_tag))
            self.unbind_class(self._key_tag, "<KeyPress>")
            self.deletecommand(self._key_binding)
            self._key_binding = None
        super().destroy()
