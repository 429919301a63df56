"""
core/logging/logic/log_setup.py
===============================

Root logger configuration for the application.

Modules log through ``logging.getLogger(__name__)``; this module only decides
where those records go (console and, optionally, a UTF-8 log file).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from core.config.config_service import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Marker attribute so repeated setup replaces our handlers instead of stacking them
_HANDLER_MARK = "_timebutton_handler"


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARK, True)
    return handler


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """
    Installs console (and optional file) handlers on the root logger.

    Args:
        cfg (LoggingConfig): Level name and optional log file path.

    Returns:
        logging.Logger: The configured root logger.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = [_mark(logging.StreamHandler())]

    if cfg.file:
        path = Path(cfg.file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(_mark(logging.FileHandler(path, encoding="utf-8")))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(_resolve_level(cfg.level))
    return root
