"""Curve tessellation into edge-matrix points.

Provides:
    - Circle outlines sampled at 100 evenly spaced angles
    - Hermite and Bézier cubics sampled at a fixed parameter step
    - Cubic polynomial evaluation (Horner form)

Coefficients:
    Per-axis coefficients come from ``[p0 p1 p2 p3] @ basis`` (see
    src.utils.matrix) and are ordered highest degree first:
    x(t) = c0·t³ + c1·t² + c2·t + c3.

Sampling:
    The sample count is fixed up front as ceil(1/step), with a small
    tolerance so steps like 1/49 (where 49·step rounds to just under 1) don't
    gain an extra sample at t ≈ 1. Parameters are then i·step; t = 1 itself is
    never sampled.
"""

import logging
import math
from typing import Callable, Dict, Sequence, Union

import numpy as np

from src.utils import matrix
from src.utils.validators import CircleSpec, CurveSpec, Point3

from .edges import EdgeMatrix

logger = logging.getLogger(__name__)

CIRCLE_SAMPLES = 100

CURVE_BASES: Dict[str, Callable[[], np.ndarray]] = {
    "hermite": matrix.make_hermite,
    "bezier": matrix.make_bezier,
}

# 1/step within this of an integer k counts as exactly k samples
_STEP_TOLERANCE = 1e-9


def _sample_count(step: float) -> int:
    """Number of parameters t = i·step with t < 1."""
    return max(math.ceil(1.0 / step - _STEP_TOLERANCE), 1)


def add_circle(m: EdgeMatrix, cx: float, cy: float, cz: float, r: float) -> None:
    """Append a circle outline of center (cx, cy) and radius r.

    Parameters
    ----------
    m : EdgeMatrix
        Target matrix; grows by exactly CIRCLE_SAMPLES columns
    cx, cy : float
        Center
    cz : float
        Accepted for call-site symmetry with 3D builders; not sampled,
        every point gets z = 0
    r : float
        Radius, ≥ 0

    Raises
    ------
    ValueError
        If any argument is non-finite or r < 0
    """
    spec = CircleSpec(center=Point3(x=cx, y=cy, z=cz), radius=r)
    for i in range(CIRCLE_SAMPLES):
        angle = 2.0 * math.pi * i / CIRCLE_SAMPLES
        m.append(Point3(
            x=spec.radius * math.cos(angle) + spec.center.x,
            y=spec.radius * math.sin(angle) + spec.center.y,
            z=0.0,
        ))
    logger.debug("Added circle c=(%g, %g) r=%g as %d points", cx, cy, r, CIRCLE_SAMPLES)


def add_curve(
    m: EdgeMatrix,
    x0: float, y0: float,
    x1: float, y1: float,
    x2: float, y2: float,
    x3: float, y3: float,
    step: float,
    curve_type: str
) -> None:
    """Append a tessellated cubic curve.

    Parameters
    ----------
    m : EdgeMatrix
        Target matrix
    x0, y0 .. x3, y3 : float
        "bezier": four control points.
        "hermite": endpoints (x0, y0), (x1, y1), then tangents (x2, y2)
        at the start and (x3, y3) at the end.
    step : float
        Parameter increment, 0 < step ≤ 1
    curve_type : str
        "hermite" or "bezier"

    Notes
    -----
    An unknown curve_type is logged and ignored: nothing is appended and no
    exception is raised.
    """
    basis_factory = CURVE_BASES.get(curve_type)
    if basis_factory is None:
        logger.warning(
            "Unsupported curve type %r passed to add_curve; expected one of %s",
            curve_type, sorted(CURVE_BASES)
        )
        return

    spec = CurveSpec(p0=(x0, y0), p1=(x1, y1), p2=(x2, y2), p3=(x3, y3), step=step)
    basis = basis_factory()
    x_coefs = matrix.multiply([spec.x_row()], basis)
    y_coefs = matrix.multiply([spec.y_row()], basis)

    count = _sample_count(spec.step)
    for i in range(count):
        t = i * spec.step
        m.append(Point3(x=cubic_eval(t, x_coefs), y=cubic_eval(t, y_coefs), z=0.0))
    logger.debug("Added %s curve as %d points (step=%g)", curve_type, count, spec.step)


def cubic_eval(t: float, coefficients: Union[np.ndarray, Sequence[float]]) -> float:
    """Evaluate c0·t³ + c1·t² + c2·t + c3.

    ``coefficients`` is a length-4 sequence or a 1×4 matrix, highest degree
    first.
    """
    coefs = np.ravel(np.asarray(coefficients, dtype=np.float64))
    if coefs.size != 4:
        raise ValueError(f"Cubic needs exactly 4 coefficients, got {coefs.size}")
    c0, c1, c2, c3 = coefs
    return float(((c0 * t + c1) * t + c2) * t + c3)
