"""Small matrix helpers used by the edge-matrix builders.

Provides:
    - Zero-initialised matrix allocation
    - Matrix product (row vectors × coefficient matrices)
    - Column extraction from 4×N point tables
    - Cubic basis matrices for Bézier and Hermite curves

Basis convention:
    The basis matrices are laid out so that a 1×4 coordinate row multiplied on
    the left yields the polynomial coefficients highest degree first:

        [p0 p1 p2 p3] @ make_bezier()  →  [a b c d]
        x(t) = a·t³ + b·t² + c·t + d

    Hermite rows take [p0 p1 r0 r1]: the two endpoints, then the tangents
    at p0 and p1.
"""

from typing import Sequence, Union

import numpy as np

ArrayLike = Union[np.ndarray, Sequence[Sequence[float]]]


# Standard cubic basis matrices (column-vector form, M @ P).
_BEZIER = np.array([
    [-1.0, 3.0, -3.0, 1.0],
    [3.0, -6.0, 3.0, 0.0],
    [-3.0, 3.0, 0.0, 0.0],
    [1.0, 0.0, 0.0, 0.0],
], dtype=np.float64)

_HERMITE = np.array([
    [2.0, -2.0, 1.0, 1.0],
    [-3.0, 3.0, -2.0, -1.0],
    [0.0, 0.0, 1.0, 0.0],
    [1.0, 0.0, 0.0, 0.0],
], dtype=np.float64)


def new_matrix(rows: int = 4, cols: int = 4) -> np.ndarray:
    """Allocate a zero-filled float64 matrix.

    Parameters
    ----------
    rows, cols : int
        Matrix dimensions, both ≥ 0

    Returns
    -------
    np.ndarray
        Zero matrix, shape (rows, cols)
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"Matrix dimensions must be non-negative, got {rows}x{cols}")
    return np.zeros((rows, cols), dtype=np.float64)


def multiply(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Return the matrix product a @ b.

    Raises
    ------
    ValueError
        If inner dimensions don't agree
    """
    a = np.atleast_2d(np.asarray(a, dtype=np.float64))
    b = np.atleast_2d(np.asarray(b, dtype=np.float64))
    if a.shape[1] != b.shape[0]:
        raise ValueError(f"Cannot multiply {a.shape[0]}x{a.shape[1]} by {b.shape[0]}x{b.shape[1]}")
    return a @ b


def extract_column(m: ArrayLike, index: int) -> np.ndarray:
    """Copy column `index` of `m` as a 1D vector.

    Raises
    ------
    IndexError
        If index is outside [0, cols)
    """
    m = np.atleast_2d(np.asarray(m, dtype=np.float64))
    cols = m.shape[1]
    if not 0 <= index < cols:
        raise IndexError(f"Column {index} out of range for matrix with {cols} columns")
    return m[:, index].copy()


def make_bezier() -> np.ndarray:
    """Bézier basis (4×4), for row vectors [p0 p1 p2 p3]."""
    return _BEZIER.T.copy()


def make_hermite() -> np.ndarray:
    """Hermite basis (4×4), for row vectors [p0 p1 r0 r1]."""
    return _HERMITE.T.copy()
