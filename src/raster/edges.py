"""Edge matrix: the shared point table consumed by draw_lines.

An edge matrix is a 4×N homogeneous table (rows x, y, z, w). Points, edges,
circle outlines and curve tessellations are all appended as columns, so the
drawer can treat any of them as consecutive column pairs.

Columns are only ever appended; w is always 1.
"""

import logging
from typing import Iterator, List, Tuple

import numpy as np

from src.utils.validators import Point3

logger = logging.getLogger(__name__)


class EdgeMatrix:
    """Growable 4×N table of homogeneous points.

    Rows are kept as Python lists so appends are cheap; ``as_array`` returns
    a numpy snapshot for the matrix helpers.
    """

    def __init__(self):
        self._rows: Tuple[List[float], List[float], List[float], List[float]] = ([], [], [], [])

    def __len__(self) -> int:
        return len(self._rows[0])

    def __repr__(self) -> str:
        return f"EdgeMatrix(columns={len(self)})"

    def append(self, point: Point3) -> None:
        for row, value in zip(self._rows, point.homogeneous()):
            row.append(value)

    def column(self, index: int) -> np.ndarray:
        """Column ``index`` as a 4-vector (x, y, z, w)."""
        if not 0 <= index < len(self):
            raise IndexError(f"Column {index} out of range for matrix with {len(self)} columns")
        return np.array([row[index] for row in self._rows], dtype=np.float64)

    def columns(self) -> Iterator[Tuple[float, float, float, float]]:
        return zip(*self._rows)

    def as_array(self) -> np.ndarray:
        """Copy of the table, shape (4, N), float64."""
        return np.array(self._rows, dtype=np.float64).reshape(4, len(self))


def add_point(m: EdgeMatrix, x: float, y: float, z: float) -> None:
    """Append point (x, y, z, 1) to an edge matrix.

    Raises
    ------
    ValueError
        If a coordinate is not a finite number
    """
    m.append(Point3(x=x, y=y, z=z))


def add_edge(
    m: EdgeMatrix,
    x0: float, y0: float, z0: float,
    x1: float, y1: float, z1: float
) -> None:
    """Append an edge as two adjacent columns.

    Both endpoints are validated before anything is appended, so a bad
    endpoint never leaves half an edge behind.
    """
    start = Point3(x=x0, y=y0, z=z0)
    end = Point3(x=x1, y=y1, z=z1)
    m.append(start)
    m.append(end)
