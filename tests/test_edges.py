"""Tests for the edge matrix builder.

Tests for src.raster.edges:
    - add_point appends homogeneous columns (w = 1)
    - add_edge appends two adjacent columns in order
    - Malformed input is rejected without touching the matrix
    - Column access and numpy snapshots

Run:
    pytest tests/test_edges.py -v
"""

import numpy as np
import pytest

from src.raster import edges


@pytest.fixture
def m():
    return edges.EdgeMatrix()


def test_new_matrix_is_empty(m):
    """A new edge matrix has 4 rows and no columns."""
    assert len(m) == 0
    assert m.as_array().shape == (4, 0)


def test_add_point_appends_homogeneous_column(m):
    """add_point stores (x, y, z, 1)."""
    edges.add_point(m, 1.5, -2.0, 3.0)
    assert len(m) == 1
    np.testing.assert_array_equal(m.column(0), [1.5, -2.0, 3.0, 1.0])


def test_add_point_preserves_insertion_order(m):
    """Columns come back in the order they were added."""
    for i in range(5):
        edges.add_point(m, i, 2 * i, 3 * i)
    table = m.as_array()
    np.testing.assert_array_equal(table[0], [0, 1, 2, 3, 4])
    np.testing.assert_array_equal(table[1], [0, 2, 4, 6, 8])
    np.testing.assert_array_equal(table[3], np.ones(5))


def test_add_edge_appends_two_columns(m):
    """add_edge stores its endpoints as adjacent columns."""
    edges.add_edge(m, 0, 1, 2, 3, 4, 5)
    assert len(m) == 2
    np.testing.assert_array_equal(m.column(0), [0, 1, 2, 1])
    np.testing.assert_array_equal(m.column(1), [3, 4, 5, 1])


def test_every_column_is_affine(m):
    """w is 1 for points and edges alike."""
    edges.add_point(m, 9, 9, 9)
    edges.add_edge(m, 0, 0, 0, 1, 1, 1)
    edges.add_edge(m, -1, -1, -1, 2, 2, 2)
    assert np.all(m.as_array()[3] == 1.0)


def test_add_edge_wrong_arity_raises(m):
    """Exactly two 3D points are required."""
    with pytest.raises(TypeError):
        edges.add_edge(m, 0, 1, 2, 3, 4)
    with pytest.raises(TypeError):
        edges.add_edge(m, 0, 1, 2, 3, 4, 5, 6)
    assert len(m) == 0


@pytest.mark.parametrize("bad", [float('nan'), float('inf'), "abc", None])
def test_add_edge_bad_value_leaves_matrix_untouched(m, bad):
    """A bad second endpoint doesn't leave half an edge behind."""
    edges.add_point(m, 0, 0, 0)
    with pytest.raises(ValueError):
        edges.add_edge(m, 0, 0, 0, 1, bad, 1)
    assert len(m) == 1


def test_add_point_rejects_non_finite(m):
    with pytest.raises(ValueError):
        edges.add_point(m, float('inf'), 0, 0)
    assert len(m) == 0


def test_column_out_of_range(m):
    """Indexing past the last column is an IndexError."""
    edges.add_point(m, 0, 0, 0)
    with pytest.raises(IndexError):
        m.column(1)
    with pytest.raises(IndexError):
        m.column(-1)


def test_column_is_a_copy(m):
    """Mutating a returned column doesn't change the matrix."""
    edges.add_edge(m, 0, 1, 2, 3, 4, 5)
    col = m.column(1)
    col[0] = 100.0
    np.testing.assert_array_equal(m.column(1), [3, 4, 5, 1])


def test_columns_iterates_tuples(m):
    edges.add_edge(m, 0, 1, 2, 3, 4, 5)
    assert list(m.columns()) == [(0.0, 1.0, 2.0, 1.0), (3.0, 4.0, 5.0, 1.0)]


def test_as_array_is_a_copy(m):
    """Mutating the snapshot doesn't change the matrix."""
    edges.add_point(m, 1, 2, 3)
    snapshot = m.as_array()
    snapshot[0, 0] = 100.0
    assert m.column(0)[0] == 1.0
