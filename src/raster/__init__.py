"""Edge-matrix rasterization.

Builds homogeneous point tables from points, edges, circles and cubic curves,
then rasterizes them as polylines onto a numpy framebuffer.

Modules:
    - display: resolution constants, framebuffer allocation, DrawContext
    - edges: EdgeMatrix with add_point / add_edge
    - curves: circle and Hermite/Bézier tessellation, cubic_eval
    - draw: octant line rasterizer, plot, draw_lines

Invariants:
    - Every edge-matrix column is (x, y, z, 1)
    - Drawing coordinates are bottom-up; plot() flips y into row indices
    - Out-of-bounds pixels are dropped, never an error
    - The draw color travels in a DrawContext, never in module state
"""

from .curves import add_circle, add_curve, cubic_eval
from .display import XRES, YRES, DEFAULT_DRAW_COLOR, DrawContext, clear_screen, new_screen
from .draw import draw_line, draw_line_from_params, draw_lines, plot, round_half_up
from .edges import EdgeMatrix, add_edge, add_point

__all__ = [
    'XRES',
    'YRES',
    'DEFAULT_DRAW_COLOR',
    'DrawContext',
    'EdgeMatrix',
    'add_circle',
    'add_curve',
    'add_edge',
    'add_point',
    'clear_screen',
    'cubic_eval',
    'draw_line',
    'draw_line_from_params',
    'draw_lines',
    'new_screen',
    'plot',
    'round_half_up',
]
