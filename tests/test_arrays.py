"""Tests for numpy/scipy views of a model."""

import numpy as np
import pytest

from gmodel import Model, PointNotFound, adjacency_matrix, build_model, connected_components, to_arrays


@pytest.fixture
def square():
    """Square 1-2-3-4 plus an isolated point 5."""
    return build_model(
        [(0, 0, 0, 1), (1, 0, 0, 1), (1, 1, 0, 1), (0, 1, 0, 1), (-7, 3, 2, 1)],
        [(0, 1), (1, 2), (2, 3), (3, 0)],
    )


class TestBuildModel:
    """Bulk construction."""

    def test_handles_follow_input_order(self, square):
        assert list(square.points) == [1, 2, 3, 4, 5]
        assert list(square.lines) == [1, 2, 3, 4]
        assert square.get_point(5).coords == (-7, 3, 2, 1)
        assert square.get_point_lines(1) == [1, 4]

    def test_options_forwarded(self):
        m = build_model([(0, 0, 0, 0)], purge_stale=True, strict_endpoints=True)
        assert m.purge_stale and m.strict_endpoints
        with pytest.raises(PointNotFound):
            m.add_line(1, 2)

    def test_empty(self):
        m = build_model([])
        assert m.point_count == 0


class TestToArrays:
    """Flat coordinate and segment arrays."""

    def test_shapes_and_values(self, square):
        handles, coords, segments = to_arrays(square)
        np.testing.assert_array_equal(handles, [1, 2, 3, 4, 5])
        assert coords.shape == (5, 4)
        assert coords.dtype == np.int64
        np.testing.assert_array_equal(coords[4], [-7, 3, 2, 1])
        np.testing.assert_array_equal(segments, [[0, 1], [1, 2], [2, 3], [3, 0]])

    def test_rows_follow_deletions(self, square):
        square.del_point(2)
        handles, coords, segments = to_arrays(square)
        np.testing.assert_array_equal(handles, [1, 3, 4, 5])
        # лінії 1 і 2 зникли разом із точкою 2
        np.testing.assert_array_equal(segments, [[1, 2], [2, 0]])

    def test_dangling_line_skipped(self, square):
        square.add_line(5, 42)
        _, _, segments = to_arrays(square)
        assert len(segments) == 4

    def test_int64_extremes(self):
        m = Model()
        m.add_point(2 ** 63 - 1, -(2 ** 63), 0, 1)
        _, coords, _ = to_arrays(m)
        np.testing.assert_array_equal(coords, [[2 ** 63 - 1, -(2 ** 63), 0, 1]])

    def test_empty_model(self):
        handles, coords, segments = to_arrays(Model())
        assert handles.shape == (0,)
        assert coords.shape == (0, 4)
        assert segments.shape == (0, 2)


class TestGraph:
    """Sparse adjacency and components."""

    def test_adjacency_symmetric(self, square):
        adj = adjacency_matrix(square).toarray()
        assert adj.shape == (5, 5)
        np.testing.assert_array_equal(adj, adj.T)
        assert adj[0, 1] == 1 and adj[0, 3] == 1 and adj[0, 2] == 0
        assert adj[4].sum() == 0

    def test_parallel_lines_and_loops_counted(self):
        m = build_model([(0, 0, 0, 0), (1, 0, 0, 0)], [(0, 1), (1, 0), (0, 0)])
        adj = adjacency_matrix(m).toarray()
        assert adj[0, 1] == 2
        assert adj[0, 0] == 2

    def test_adjacency_empty(self):
        adj = adjacency_matrix(Model())
        assert adj.shape == (0, 0)
        assert adj.nnz == 0

    def test_components(self, square):
        assert connected_components(square) == [[1, 2, 3, 4], [5]]

    def test_components_after_cascade(self, square):
        square.del_point(1)
        square.del_point(3)
        assert connected_components(square) == [[2], [4], [5]]

    def test_components_empty(self):
        assert connected_components(Model()) == []
