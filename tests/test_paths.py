import math

import pytest

from procmesh.parametric import ParametricPath
from procmesh.paths import (
    AxisSwapPath,
    EmptyPath,
    MergePath,
    PathVertex,
    RotatePath,
    SubdividePath,
    TransformPath,
)
from procmesh.vertex import Axis, count, mix, rotate


def _line(segments=2, x=0.0):
    return ParametricPath(
        lambda t: PathVertex(
            position=(x, 0.0, t),
            tangent=(0.0, 0.0, 1.0),
            normal=(1.0, 0.0, 0.0),
            tex_coord=t,
        ),
        segments,
    )


def _arc(segments=4):
    def evaluate(t):
        a = t * math.pi / 2
        return PathVertex(
            position=(math.cos(a), math.sin(a), 0.5),
            tangent=(-math.sin(a), math.cos(a), 0.0),
            normal=(math.cos(a), math.sin(a), 0.0),
            tex_coord=t,
        )

    return ParametricPath(evaluate, segments)


def test_binormal_of_z_tangent_and_x_normal():
    vertex = PathVertex(tangent=(0.0, 0.0, 1.0), normal=(1.0, 0.0, 0.0))
    assert vertex.binormal() == (0.0, 1.0, 0.0)


def test_empty_path_has_nothing():
    path = EmptyPath()
    assert list(path.edges()) == []
    assert list(path.vertices()) == []


def test_transform_path_applies_function_and_keeps_edges():
    source = _line(3)
    path = TransformPath(
        source, lambda v: PathVertex(v.position, v.tangent, v.normal, 1.0 - v.tex_coord)
    )
    assert list(path.edges()) == list(source.edges())
    originals = [v.tex_coord for v in source.vertices()]
    assert [v.tex_coord for v in path.vertices()] == [1.0 - t for t in originals]


def test_axis_swap_path_reorders_components():
    source = _arc()
    path = AxisSwapPath(source, Axis.Y, Axis.Z, Axis.X)
    for before, after in zip(source.vertices(), path.vertices(), strict=True):
        assert after.position == (before.position[1], before.position[2], before.position[0])
        assert after.tangent == (before.tangent[1], before.tangent[2], before.tangent[0])
        assert after.normal == (before.normal[1], before.normal[2], before.normal[0])
        assert after.tex_coord == before.tex_coord
    assert list(path.edges()) == list(source.edges())


def test_rotate_path_rotates_position_and_normal_only():
    source = _arc()
    angle = 0.7
    path = RotatePath(source, angle, Axis.Z)
    for before, after in zip(source.vertices(), path.vertices(), strict=True):
        assert after.position == pytest.approx(rotate(before.position, angle, Axis.Z))
        assert after.normal == pytest.approx(rotate(before.normal, angle, Axis.Z))
        assert after.tangent == before.tangent
        assert math.dist(after.position, (0, 0, 0)) == pytest.approx(
            math.dist(before.position, (0, 0, 0))
        )


def test_rotate_path_accepts_vector_axis():
    source = _line(2, x=1.0)
    by_enum = [v.position for v in RotatePath(source, 1.1, Axis.Y).vertices()]
    by_vector = [v.position for v in RotatePath(source, 1.1, (0.0, 2.0, 0.0)).vertices()]
    assert by_vector == pytest.approx(by_enum)


def test_merge_path_concatenates_and_offsets_edges():
    first = _line(2)
    second = _arc(3)
    merged = MergePath(first, second)
    vertices = list(merged.vertices())
    assert vertices == list(first.vertices()) + list(second.vertices())
    offset = count(first.vertices())
    expected = list(first.edges()) + [(a + offset, b + offset) for a, b in second.edges()]
    assert list(merged.edges()) == expected


def test_merge_path_with_empty_parts():
    merged = MergePath(EmptyPath(), _line(2), EmptyPath())
    assert list(merged.edges()) == list(_line(2).edges())
    assert count(merged.vertices()) == count(_line(2).vertices())


def test_subdivide_path_counts():
    source = _arc(4)
    path = SubdividePath(source)
    n_vertices = count(source.vertices())
    n_edges = count(source.edges())
    assert count(path.vertices()) == n_vertices + n_edges
    assert count(path.edges()) == 2 * n_edges


def test_subdivide_path_midpoints_and_edges():
    source = _arc(4)
    path = SubdividePath(source)
    originals = list(source.vertices())
    vertices = list(path.vertices())
    n = len(originals)
    assert vertices[:n] == originals
    edges = list(path.edges())
    for k, (a, b) in enumerate(source.edges()):
        assert edges[2 * k] == (a, n + k)
        assert edges[2 * k + 1] == (n + k, b)
        mid = vertices[n + k]
        assert mid.position == pytest.approx(mix(originals[a].position, originals[b].position, 0.5))
        assert math.hypot(*mid.tangent) == pytest.approx(1.0)
        assert math.hypot(*mid.normal) == pytest.approx(1.0)
        assert mid.tex_coord == pytest.approx((originals[a].tex_coord + originals[b].tex_coord) / 2)


def test_subdivide_path_indices_valid():
    path = SubdividePath(SubdividePath(_line(3)))
    total = count(path.vertices())
    assert all(0 <= i < total for edge in path.edges() for i in edge)