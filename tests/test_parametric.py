import pytest

from procmesh.parametric import ParametricPath, ParametricShape
from procmesh.vertex import ShapeVertex, count


def _line(t):
    return ShapeVertex(position=(t, 2.0 * t), tangent=(1.0, 0.0), tex_coord=t)


@pytest.mark.parametrize("segments", [1, 3, 16])
def test_shape_counts(segments):
    shape = ParametricShape(_line, segments)
    assert count(shape.edges()) == segments
    assert count(shape.vertices()) == segments + 1


def test_shape_edges_connect_consecutive_vertices():
    shape = ParametricShape(_line, 5)
    edges = list(shape.edges())
    assert all(b == a + 1 for a, b in edges)
    assert edges[0][0] == 0
    assert edges[-1][1] == count(shape.vertices()) - 1


def test_shape_parameter_runs_from_zero_to_one():
    shape = ParametricShape(_line, 4)
    params = [v.tex_coord for v in shape.vertices()]
    assert params[0] == 0.0
    assert params[-1] == pytest.approx(1.0)
    assert params == sorted(params)


def test_shape_default_segments():
    shape = ParametricShape(_line)
    assert count(shape.edges()) == 16


def test_zero_segments_is_empty():
    shape = ParametricShape(_line, 0)
    assert list(shape.edges()) == []
    assert list(shape.vertices()) == []


def test_negative_segments_is_empty():
    path = ParametricPath(lambda t: t, -2)
    assert list(path.edges()) == []
    assert list(path.vertices()) == []


def test_path_vertices_and_edges():
    path = ParametricPath(lambda t: ("point", t), 8)
    vertices = list(path.vertices())
    assert len(vertices) == 9
    assert all(tag == "point" for tag, _ in vertices)
    assert vertices[-1][1] == pytest.approx(1.0)
    assert max(b for _, b in path.edges()) == len(vertices) - 1


def test_iteration_can_be_repeated():
    shape = ParametricShape(_line, 2)
    for _ in range(2):
        assert list(shape.edges()) == [(0, 1), (1, 2)]
        assert [v.tex_coord for v in shape.vertices()] == pytest.approx(
            [0.0, 0.5, 1.0]
        )