"""Display constants, framebuffer allocation and the drawing context.

The framebuffer is a row-major numpy array of shape (height, width, 3),
dtype uint8. Row 0 is the top of the image; drawing coordinates are
bottom-up and flipped by ``draw.plot``.

Usage::

    from src.raster.display import DrawContext, new_screen
    from src.utils import validators

    cfg = validators.load_display_config("configs/display_v1.yaml")
    ctx = DrawContext.from_config(cfg)
    screen = new_screen(ctx.width, ctx.height, cfg.background)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Sequence, Tuple

import numpy as np

from src.utils.validators import DisplayV1

logger = logging.getLogger(__name__)

XRES = 500
YRES = 500

Color = Tuple[int, int, int]

DEFAULT_DRAW_COLOR: Color = (0, 0, 0)
DEFAULT_BACKGROUND: Color = (255, 255, 255)


def _as_color(color: Sequence[int]) -> Color:
    channels = tuple(int(c) for c in color)
    if len(channels) != 3 or any(not 0 <= c <= 255 for c in channels):
        raise ValueError(f"Color must be three ints in [0, 255], got {tuple(color)}")
    return channels


@dataclass(frozen=True)
class DrawContext:
    """Target bounds and active color for one drawing pass.

    ``width``/``height`` are the framebuffer bounds used for clipping and for
    the y flip; they should match the screen being drawn on.
    """

    width: int = XRES
    height: int = YRES
    color: Color = DEFAULT_DRAW_COLOR

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Screen size must be positive, got {self.width}x{self.height}")
        object.__setattr__(self, 'color', _as_color(self.color))

    @classmethod
    def from_config(cls, cfg: DisplayV1) -> DrawContext:
        return cls(width=cfg.xres, height=cfg.yres, color=tuple(cfg.draw_color))

    def with_color(self, color: Sequence[int]) -> DrawContext:
        """Return a copy of this context drawing in ``color``."""
        return replace(self, color=_as_color(color))


def new_screen(
    width: int = XRES,
    height: int = YRES,
    background: Sequence[int] = DEFAULT_BACKGROUND
) -> np.ndarray:
    """Allocate a framebuffer filled with ``background``.

    Returns
    -------
    np.ndarray
        Screen, shape (height, width, 3), uint8
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Screen size must be positive, got {width}x{height}")
    screen = np.empty((height, width, 3), dtype=np.uint8)
    screen[:, :] = _as_color(background)
    logger.debug("Allocated %dx%d screen", width, height)
    return screen


def clear_screen(screen: np.ndarray, background: Sequence[int] = DEFAULT_BACKGROUND) -> None:
    """Fill every pixel of ``screen`` with ``background`` in place."""
    screen[:, :] = _as_color(background)
