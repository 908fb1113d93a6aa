"""Wireframe raster core: edge matrices, curve tessellation and line drawing.

This package turns point collections into pixel writes on an in-memory
framebuffer. It is the 2D back half of a wireframe pipeline: callers supply
already projected points, the core tessellates curves and rasterizes the
resulting polylines.

Architecture layers (strict one-way dependency):
    src/raster/ → src/utils/

Key invariants:
    - Edge matrices are 4×N homogeneous tables, w = 1 for every column
    - Framebuffers are (YRES, XRES, 3) uint8 arrays, row 0 at the top
    - Drawing coordinates are bottom-up; plot() flips y into row indices
    - YAML-only configs
"""

__version__ = "0.3.0"
