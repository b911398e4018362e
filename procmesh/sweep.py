"""Meshes made by spinning a shape around an axis or extruding it along a path."""

from __future__ import annotations

import math
from typing import Iterator, Protocol, Sequence, Tuple, Union

from procmesh.paths import PathVertex
from procmesh.vertex import Axis, MeshVertex, ShapeVertex, Vec3, count, rotate

Edge = Tuple[int, int]
Triangle = Tuple[int, int, int]


class _Shape(Protocol):
    def edges(self) -> Iterator[Edge]: ...

    def vertices(self) -> Iterator[ShapeVertex]: ...


class _Path(Protocol):
    def edges(self) -> Iterator[Edge]: ...

    def vertices(self) -> Iterator[PathVertex]: ...


def _axis_vector(axis: Union[Axis, Sequence[float]]) -> Vec3:
    if isinstance(axis, Axis):
        return axis.unit
    values = tuple(float(c) for c in axis)
    if len(values) == 2:
        return (values[0], values[1], 0.0)
    x, y, z = values
    return (x, y, z)


class LatheMesh:
    """Spins a shape around an axis lying on the xy-plane.

    The u texture coordinate comes from the shape, v is the angle divided by
    the sweep.
    """

    def __init__(
        self,
        shape: _Shape,
        axis: Union[Axis, Sequence[float]],
        slices: int = 32,
        start: float = 0.0,
        sweep: float = math.radians(360.0),
    ) -> None:
        self.shape = shape
        self.axis = _axis_vector(axis)
        self.slices = slices
        self.start = start
        self.sweep = sweep

    def triangles(self) -> Iterator[Triangle]:
        if self.slices < 1:
            return
        delta = self.slices + 1
        for e0, e1 in self.shape.edges():
            for i in range(2 * self.slices):
                s = i // 2
                if i % 2 == 0:
                    yield (e0 * delta + s, e1 * delta + s, e1 * delta + s + 1)
                else:
                    yield (e0 * delta + s, e1 * delta + s + 1, e0 * delta + s + 1)

    def vertices(self) -> Iterator[MeshVertex]:
        if self.slices < 1:
            return
        delta_angle = self.sweep / self.slices
        for shape_vertex in self.shape.vertices():
            px, py = shape_vertex.position
            nx, ny = shape_vertex.normal()
            for i in range(self.slices + 1):
                angle = i * delta_angle + self.start
                yield MeshVertex(
                    position=rotate((px, py, 0.0), angle, self.axis),
                    normal=rotate((nx, ny, 0.0), angle, self.axis),
                    tex_coord=(shape_vertex.tex_coord, angle / self.sweep),
                )


class ExtrudeMesh:
    """Extrudes a shape along a path.

    The shape's x axis follows the path normal and its y axis the path
    binormal. The u texture coordinate comes from the shape, v from the path.
    """

    def __init__(self, shape: _Shape, path: _Path) -> None:
        self.shape = shape
        self.path = path
        self.shape_vertex_count = count(shape.vertices())

    def triangles(self) -> Iterator[Triangle]:
        n = self.shape_vertex_count
        for p0, p1 in self.path.edges():
            for s0, s1 in self.shape.edges():
                yield (s0 + p0 * n, s1 + p0 * n, s1 + p1 * n)
                yield (s0 + p0 * n, s1 + p1 * n, s0 + p1 * n)

    def vertices(self) -> Iterator[MeshVertex]:
        for path_vertex in self.path.vertices():
            normal = path_vertex.normal
            binormal = path_vertex.binormal()
            for shape_vertex in self.shape.vertices():
                sx, sy = shape_vertex.position
                nx, ny = shape_vertex.normal()
                yield MeshVertex(
                    position=tuple(  # type: ignore[arg-type]
                        p + sx * n + sy * b
                        for p, n, b in zip(path_vertex.position, normal, binormal)
                    ),
                    normal=tuple(  # type: ignore[arg-type]
                        nx * n + ny * b for n, b in zip(normal, binormal)
                    ),
                    tex_coord=(shape_vertex.tex_coord, path_vertex.tex_coord),
                )