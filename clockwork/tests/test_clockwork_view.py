"""
clockwork/tests/test_clockwork_view.py

Wiring of ClockworkView: label rendering, format buttons, keyboard shortcuts
and teardown. Needs a display; skipped when Tk cannot start.
"""

from __future__ import annotations

import unittest
from datetime import datetime
from pathlib import Path

try:
    import tkinter as tk
except ImportError:  # pragma: no cover
    tk = None

from clockwork.logic.clock_model import ClockDisplayModel
from clockwork.logic.clock_service import ClockService
from clockwork.models.clockwork_settings import ClockworkSettings

ROOT = Path(__file__).resolve().parents[2]


class TestClockworkView(unittest.TestCase):
    root = None

    @classmethod
    def setUpClass(cls) -> None:
        if tk is None:
            raise unittest.SkipTest("tkinter is not available")
        try:
            cls.root = tk.Tk()
        except tk.TclError as ex:
            raise unittest.SkipTest(f"no display: {ex}")

    @classmethod
    def tearDownClass(cls) -> None:
        if cls.root is not None:
            cls.root.destroy()

    def setUp(self) -> None:
        from clockwork.gui.clockwork_view import ClockworkView

        moment = datetime(2024, 6, 1, 14, 40, 15)
        self.model = ClockDisplayModel(ClockService(now_provider=lambda: moment))
        self.view = ClockworkView(self.root, ClockworkSettings(), model=self.model, asset_dir=ROOT)
        self.view.pack(fill="both", expand=True)
        self.root.update()

    def tearDown(self) -> None:
        if self.view.winfo_exists():
            self.view.destroy()
        self.root.unbind("<KeyPress>")
        self.root.update()

    def _label(self) -> tuple[str, str]:
        return str(self.view.clock.cget("text")), str(self.view.clock.cget("foreground"))

    def _press(self, keysym: str) -> None:
        self.view.focus_force()
        self.root.update()
        if self.root.focus_get() is None:
            self.skipTest("window manager did not grant keyboard focus")
        self.view.event_generate(f"<KeyPress-{keysym}>")
        self.root.update()

    def test_label_populated_after_construction(self) -> None:
        self.assertEqual(self._label(), ("02:40:15 PM", ""))

    def test_buttons_switch_format(self) -> None:
        self.view.btn_24h.invoke()
        self.assertFalse(self.model.use_12h)
        self.assertEqual(self._label()[0], "14:40:15")
        self.view.btn_12h.invoke()
        self.assertTrue(self.model.use_12h)
        self.assertEqual(self._label()[0], "02:40:15 PM")

    def test_key_press_reaches_model(self) -> None:
        self._press("Up")
        self.assertEqual(self._label(), ("02:40:15 PM", "red"))
        self._press("Right")
        self.assertEqual(self._label()[0], "14:40:15")
        self._press("Return")
        self.assertEqual(self._label()[1], "black")

    def test_destroy_cancels_tick_and_keeps_other_bindings(self) -> None:
        self.root.bind("<KeyPress>", lambda _e: None)
        tag = self.view._key_tag
        task = self.view._task
        self.assertTrue(task.running)
        self.assertIn(tag, self.root.bindtags())

        self.view.destroy()

        self.assertFalse(task.running)
        self.assertNotIn(tag, self.root.bindtags())
        self.assertFalse(self.root.bind_class(tag))
        self.assertTrue(self.root.bind("<KeyPress>"))

    def test_missing_icons_do_not_break_the_view(self) -> None:
        from clockwork.gui.clockwork_view import ClockworkView

        settings = ClockworkSettings(icon_12h=Path("nope/usa.png"), icon_24h=Path("nope/eu.png"))
        view = ClockworkView(self.root, settings, model=self.model, asset_dir=ROOT)
        try:
            self.assertEqual(str(view.btn_12h.cget("text")), "12 hr")
            self.assertEqual(str(view.btn_24h.cget("text")), "24 hr")
        finally:
            view.destroy()


if __name__ == "__main__":
    unittest.main()
