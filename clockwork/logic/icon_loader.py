"""
IconLoader – loads the decorative button images with Pillow.

A missing or unreadable file is not fatal: the caller gets a transparent
placeholder of the requested size and a warning is logged.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_ICON_SIZE: Tuple[int, int] = (40, 25)


class IconLoader:
    """Scales images to a fixed icon size; relative paths resolve against `base_dir`."""

    def __init__(self, base_dir: Path, size: Tuple[int, int] = DEFAULT_ICON_SIZE) -> None:
        if size[0] <= 0 or size[1] <= 0:
            raise ValueError(f"icon size must be positive, got {size!r}")
        self._base_dir = Path(base_dir)
        self._size = (int(size[0]), int(size[1]))

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    def resolve(self, path: Path | str) -> Path:
        p = Path(path).expanduser()
        return p if p.is_absolute() else self._base_dir / p

    def placeholder(self) -> Image.Image:
        return Image.new("RGBA", self._size, (0, 0, 0, 0))

    def load(self, path: Path | str) -> Image.Image:
        """
        Args:
            path: Image file (absolute, or relative to base_dir).

        Returns:
            Image.Image: RGBA image of `size`, or a placeholder on failure.
        """
        full = self.resolve(path)
        try:
            with Image.open(full) as img:
                icon = img.convert("RGBA").resize(self._size, Image.Resampling.LANCZOS)
        except (OSError, ValueError) as ex:
            logger.warning(f"Icon '{full}' could not be loaded, using placeholder: {ex}")
            return self.placeholder()
        logger.debug(f"Loaded icon {full}")
        return icon
