"""Line rasterization onto a framebuffer.

Algorithm:
    Incremental decision-variable (Bresenham/midpoint) rasterizer split by
    octant. Endpoints are ordered by increasing x, so only four octants need
    handling; the other four are the same segments walked backwards.

        A = y1 - y0          (rise)
        B = x0 - x1          (negated run, ≤ 0 after ordering)

        octant 1   0 ≤ m ≤ 1    d = 2A + B   major x,   minor +y when d > 0
        octant 2   m > 1        d = A + 2B   major +y,  minor x when d < 0
        octant 8  -1 ≤ m < 0    d = 2A - B   major x,   minor -y when d < 0
        octant 7   m < -1       d = A - 2B   major -y,  minor x when d > 0

    Each step plots the current point, then advances. Coordinates stay
    floats; rounding to pixels happens in plot().

Coordinates:
    Drawing space is bottom-up. plot() maps (x, y) to
    screen[height - round(y) - 1][round(x)] and drops pixels outside the
    screen.
"""

import logging
import math
from typing import Optional, Sequence

import numpy as np

from src.utils import matrix

from .display import DrawContext
from .edges import EdgeMatrix

logger = logging.getLogger(__name__)

_DEFAULT_CONTEXT = DrawContext()


def round_half_up(value: float) -> int:
    """Round to the nearest pixel, fractions ≥ 0.5 going up.

    Truncates toward zero first, so negative inputs behave asymmetrically:
    2.49 → 2, 2.5 → 3, -0.5 → 0, -1.2 → -1.
    """
    whole = int(value)
    if value - whole < 0.5:
        return whole
    return int(value + 1)


def plot(screen: np.ndarray, x: float, y: float, ctx: Optional[DrawContext] = None) -> bool:
    """Write the context color at drawing point (x, y).

    The y flip uses ``ctx.height``; pixels are clipped to both the context
    bounds and the actual shape of ``screen``.

    Returns
    -------
    bool
        True if a pixel was written, False if it fell outside the screen
    """
    if ctx is None:
        ctx = _DEFAULT_CONTEXT
    rows, cols = np.shape(screen)[:2]
    col = round_half_up(x)
    row = ctx.height - round_half_up(y) - 1
    if 0 <= col < min(ctx.width, cols) and 0 <= row < min(ctx.height, rows):
        screen[row][col] = ctx.color
        return True
    return False


def draw_line(
    screen: np.ndarray,
    x0: float, y0: float,
    x1: float, y1: float,
    ctx: Optional[DrawContext] = None
) -> None:
    """Rasterize the segment (x0, y0) → (x1, y1) onto ``screen``.

    Raises
    ------
    ValueError
        If an endpoint coordinate is NaN or infinite
    """
    if not all(math.isfinite(v) for v in (x0, y0, x1, y1)):
        raise ValueError(f"Line endpoints must be finite, got ({x0}, {y0}) -> ({x1}, {y1})")
    if ctx is None:
        ctx = _DEFAULT_CONTEXT

    if x1 < x0:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    A = y1 - y0
    B = x0 - x1
    x = x0
    y = y0

    if B == 0:  # vertical
        if y1 < y0:
            y0, y1 = y1, y0
        y = y0
        while y <= y1:
            plot(screen, x, y, ctx)
            y += 1
        return

    slope = A / -B

    if 0 <= slope <= 1:  # octant 1
        d = 2 * A + B
        while x <= x1 and y <= y1:
            plot(screen, x, y, ctx)
            if d > 0:
                y += 1
                d += 2 * B
            x += 1
            d += 2 * A

    elif slope > 1:  # octant 2
        d = A + 2 * B
        while x <= x1 and y <= y1:
            plot(screen, x, y, ctx)
            if d < 0:
                x += 1
                d += 2 * A
            y += 1
            d += 2 * B

    elif slope >= -1:  # octant 8
        d = 2 * A - B
        while x <= x1 and y >= y1:
            plot(screen, x, y, ctx)
            if d < 0:
                y -= 1
                d -= 2 * B
            x += 1
            d += 2 * A

    else:  # octant 7
        d = A - 2 * B
        while x <= x1 and y >= y1:
            plot(screen, x, y, ctx)
            if d > 0:
                x += 1
                d += 2 * A
            y -= 1
            d -= 2 * B


def draw_line_from_params(
    screen: np.ndarray,
    params: Sequence[float],
    ctx: Optional[DrawContext] = None
) -> None:
    """Draw the segment given as [x0, y0, x1, y1, ...]; extra values are ignored."""
    if len(params) < 4:
        raise ValueError(f"draw_line_from_params needs at least 4 values, got {len(params)}")
    x0, y0, x1, y1 = params[:4]
    draw_line(screen, x0, y0, x1, y1, ctx)


def draw_lines(edges: EdgeMatrix, screen: np.ndarray, ctx: Optional[DrawContext] = None) -> int:
    """Draw an edge matrix as one continuous polyline.

    Consecutive columns (0, 1), (1, 2), ... (N-2, N-1) are joined, so two
    edges added with add_edge also get the connector from the end of the
    first to the start of the second.

    Returns
    -------
    int
        Number of segments drawn
    """
    table = edges.as_array()
    count = table.shape[1]
    for i in range(count - 1):
        point = matrix.extract_column(table, i)
        next_point = matrix.extract_column(table, i + 1)
        draw_line(screen, point[0], point[1], next_point[0], next_point[1], ctx)
    segments = max(count - 1, 0)
    logger.debug("Drew %d segments from %d points", segments, count)
    return segments
