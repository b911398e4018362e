"""Generators that modify the vertices or triangles of an existing mesh."""

from __future__ import annotations

import dataclasses
from typing import Callable, Iterator, Protocol, Sequence, Tuple, Union

from procmesh.vertex import Axis, MeshVertex, Vec3, count, rotate

Triangle = Tuple[int, int, int]


class _Mesh(Protocol):
    def triangles(self) -> Iterator[Triangle]: ...

    def vertices(self) -> Iterator[MeshVertex]: ...


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    ax, ay, az = a
    bx, by, bz = b
    return (ax + bx, ay + by, az + bz)


def _map_vertices(
    mesh: _Mesh, mutate: Callable[[MeshVertex], MeshVertex]
) -> Iterator[MeshVertex]:
    for vertex in mesh.vertices():
        yield mutate(vertex)


class TranslateMesh:
    """Moves the position of every vertex by a fixed offset."""

    def __init__(self, mesh: _Mesh, delta: Sequence[float]) -> None:
        dx, dy, dz = delta
        self.mesh = mesh
        self.delta: Vec3 = (float(dx), float(dy), float(dz))

    def _move(self, vertex: MeshVertex) -> MeshVertex:
        return dataclasses.replace(vertex, position=_add(vertex.position, self.delta))

    def triangles(self) -> Iterator[Triangle]:
        return self.mesh.triangles()

    def vertices(self) -> Iterator[MeshVertex]:
        return _map_vertices(self.mesh, self._move)


class RotateMesh:
    """Rotates positions and normals counterclockwise around an axis."""

    def __init__(
        self, mesh: _Mesh, angle: float, axis: Union[Axis, Sequence[float]]
    ) -> None:
        self.mesh = mesh
        self.angle = angle
        self.axis = axis

    def _turn(self, vertex: MeshVertex) -> MeshVertex:
        return dataclasses.replace(
            vertex,
            position=rotate(vertex.position, self.angle, self.axis),
            normal=rotate(vertex.normal, self.angle, self.axis),
        )

    def triangles(self) -> Iterator[Triangle]:
        return self.mesh.triangles()

    def vertices(self) -> Iterator[MeshVertex]:
        return _map_vertices(self.mesh, self._turn)


class UvFlipMesh:
    """Flips the direction of the u and/or v texture coordinate."""

    def __init__(self, mesh: _Mesh, u: bool, v: bool) -> None:
        self.mesh = mesh
        self.u = u
        self.v = v

    def _flip(self, vertex: MeshVertex) -> MeshVertex:
        tu, tv = vertex.tex_coord
        return dataclasses.replace(
            vertex,
            tex_coord=(1.0 - tu if self.u else tu, 1.0 - tv if self.v else tv),
        )

    def triangles(self) -> Iterator[Triangle]:
        return self.mesh.triangles()

    def vertices(self) -> Iterator[MeshVertex]:
        return _map_vertices(self.mesh, self._flip)


class AxisFlipMesh:
    """Mirrors a mesh along one or more axes.

    Texture coordinates are kept; the triangle winding is reversed when an
    odd number of axes is flipped.
    """

    def __init__(self, mesh: _Mesh, x: bool, y: bool, z: bool) -> None:
        self.mesh = mesh
        self.flip = (bool(x), bool(y), bool(z))
        self._signs = tuple(-1.0 if f else 1.0 for f in self.flip)
        self.reverse_winding = sum(self.flip) % 2 == 1

    def _mirror(self, vertex: MeshVertex) -> MeshVertex:
        return dataclasses.replace(
            vertex,
            position=tuple(s * c for s, c in zip(self._signs, vertex.position)),  # type: ignore[arg-type]
            normal=tuple(s * c for s, c in zip(self._signs, vertex.normal)),  # type: ignore[arg-type]
        )

    def triangles(self) -> Iterator[Triangle]:
        for a, b, c in self.mesh.triangles():
            yield (c, b, a) if self.reverse_winding else (a, b, c)

    def vertices(self) -> Iterator[MeshVertex]:
        return _map_vertices(self.mesh, self._mirror)


class MirrorMesh:
    """The source mesh followed by its mirror image along an axis."""

    def __init__(self, mesh: _Mesh, axis: Axis) -> None:
        axis = Axis(axis)
        self.mesh = mesh
        self.axis = axis
        self.mirrored = AxisFlipMesh(
            mesh, axis is Axis.X, axis is Axis.Y, axis is Axis.Z
        )

    def triangles(self) -> Iterator[Triangle]:
        yield from self.mesh.triangles()
        offset = count(self.mesh.vertices())
        for a, b, c in self.mirrored.triangles():
            yield (a + offset, b + offset, c + offset)

    def vertices(self) -> Iterator[MeshVertex]:
        yield from self.mesh.vertices()
        yield from self.mirrored.vertices()


class RepeatMesh:
    """Repeats a mesh a number of times, each copy offset by ``delta`` more.

    Fewer than one instance, or a mesh without vertices, gives an empty mesh.
    """

    def __init__(self, mesh: _Mesh, instances: int, delta: Sequence[float]) -> None:
        self.mesh = mesh
        self.instances = instances
        dx, dy, dz = delta
        self.delta: Vec3 = (float(dx), float(dy), float(dz))
        self.vertex_count = count(mesh.vertices())

    def _copies(self) -> int:
        return self.instances if self.vertex_count > 0 and self.instances > 0 else 0

    def triangles(self) -> Iterator[Triangle]:
        for k in range(self._copies()):
            base = k * self.vertex_count
            for a, b, c in self.mesh.triangles():
                yield (a + base, b + base, c + base)

    def vertices(self) -> Iterator[MeshVertex]:
        offset: Vec3 = (0.0, 0.0, 0.0)
        for _ in range(self._copies()):
            for vertex in self.mesh.vertices():
                yield dataclasses.replace(vertex, position=_add(vertex.position, offset))
            offset = _add(offset, self.delta)