"""
Clockwork feature package initializer.

Provides factory functions the main window can call to create the clock view
without hard-coding internals. GUI modules and the configuration are
imported inside the factories, so the logic and models stay importable
without Tk and without reading the user configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .models.clockwork_settings import ClockworkSettings

if TYPE_CHECKING:  # pragma: no cover
    import tkinter as tk


def get_feature_name() -> str:
    """
    Human readable feature name (used e.g. as window title).

    Returns:
        str: The configured application title.
    """
    from core.config.config_service import config_service

    return config_service.general.title


def create_feature_view(parent: "tk.Misc", settings: Optional[ClockworkSettings] = None) -> "tk.Frame":
    """
    Factory for the main clock view.

    Args:
        parent (tk.Misc): Tk container to mount the widget onto.
        settings (ClockworkSettings, optional): Overrides the configured settings.

    Returns:
        tk.Frame: A fully wired clock view.
    """
    from core.config.config_service import PROJECT_ROOT, config_service

    from .gui.clockwork_view import ClockworkView

    if settings is None:
        settings = ClockworkSettings.from_config(config_service)
    return ClockworkView(parent, settings, asset_dir=PROJECT_ROOT)
