"""
Data model for Clockwork settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

MIN_TICK_INTERVAL_MS = 50


@dataclass
class ClockworkSettings:
    """
    Encapsulates the options the clock view is built from.

    Attributes:
        use_12h (bool): Initial format; 12-hour with AM/PM if True.
        tick_interval_ms (int): Refresh cadence in milliseconds.
        font_family (str): Font family of the time label.
        font_size (int): Font size of the time label.
        timezone (str): IANA timezone name, empty for local time.
        icon_12h (Path): Image shown on the 12-hour button.
        icon_24h (Path): Image shown on the 24-hour button.
        icon_size (tuple): Width and height the icons are scaled to.
        label_12h (str): Text of the 12-hour button.
        label_24h (str): Text of the 24-hour button.
        border_color (str): Color of the button bar border.
        button_spacing (int): Horizontal gap between the buttons in pixels.
    """
    use_12h: bool = True
    tick_interval_ms: int = 1000
    font_family: str = "Arial"
    font_size: int = 30
    timezone: str = ""
    icon_12h: Path = Path("clockwork/assets/usa.ppm")
    icon_24h: Path = Path("clockwork/assets/eu.ppm")
    icon_size: Tuple[int, int] = (40, 25)
    label_12h: str = "12 hr"
    label_24h: str = "24 hr"
    border_color: str = "green"
    button_spacing: int = 50

    def __post_init__(self) -> None:
        if self.tick_interval_ms < MIN_TICK_INTERVAL_MS:
            self.tick_interval_ms = MIN_TICK_INTERVAL_MS

    @classmethod
    def from_config(cls, config) -> "ClockworkSettings":
        """
        Builds settings from a ConfigService (or anything exposing `clock`,
        `assets` and `resolve_path`).
        """
        clock = config.clock
        assets = config.assets
        return cls(
            use_12h=clock.use_12h,
            tick_interval_ms=clock.tick_interval_ms,
            font_family=clock.font_family,
            font_size=clock.font_size,
            timezone=clock.timezone,
            icon_12h=config.resolve_path(assets.icon_12h),
            icon_24h=config.resolve_path(assets.icon_24h),
            icon_size=(assets.icon_width, assets.icon_height),
        )

    def font(self) -> Tuple[str, int]:
        """
        Returns:
            tuple: Tk font spec such as ("Arial", 30).
        """
        return (self.font_family, self.font_size)
