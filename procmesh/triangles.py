"""Subdivided flat and spherical triangles."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from procmesh.vertex import (
    MeshVertex,
    Vec3,
    mix,
    normalize,
    slerp,
    triangle_normal,
)

Triangle = Tuple[int, int, int]


def _as_vec3(v: Sequence[float]) -> Vec3:
    x, y, z = v
    return (float(x), float(y), float(z))


def _triangle_indices(segments: int) -> Iterator[Triangle]:
    """Triangle indices for a triangle subdivided into rows of vertices."""
    i = 0
    for row in range(segments):
        width = segments - row
        for col in range(2 * width - 1):
            if col % 2 == 0:
                yield (i, i + 1, i + 1 + width)
                i += 1
            else:
                yield (i, i + 1 + width, i + width)
        i += 1


def _grid_parameters(segments: int) -> Iterator[Tuple[int, float, float]]:
    """Yield (row, t, t2) for each vertex below the apex row."""
    for row in range(segments):
        t = 1.0 / segments * row
        for col in range(segments - row + 1):
            yield row, t, 1.0 / (segments - row) * col


class TriangleMesh:
    """A flat triangle subdivided into ``segments`` parts along each edge."""

    def __init__(
        self,
        v0: Sequence[float],
        v1: Sequence[float],
        v2: Sequence[float],
        segments: int = 4,
    ) -> None:
        self.v0 = _as_vec3(v0)
        self.v1 = _as_vec3(v1)
        self.v2 = _as_vec3(v2)
        self.normal = triangle_normal(self.v0, self.v1, self.v2)
        self.segments = segments

    @classmethod
    def regular(cls, radius: float = 1.0, segments: int = 4) -> "TriangleMesh":
        """A triangle on the xy-plane centred at the origin."""
        return cls(
            tuple(radius * c for c in normalize((-1.0, -1.0, 0.0))),
            tuple(radius * c for c in normalize((1.0, -1.0, 0.0))),
            (0.0, radius, 0.0),
            segments,
        )

    def triangles(self) -> Iterator[Triangle]:
        return _triangle_indices(self.segments)

    def vertices(self) -> Iterator[MeshVertex]:
        if self.segments < 0:
            return
        for _, t, t2 in _grid_parameters(self.segments):
            e1 = mix(self.v0, self.v2, t)
            e2 = mix(self.v1, self.v2, t)
            yield MeshVertex(
                position=mix(e1, e2, t2),  # type: ignore[arg-type]
                normal=self.normal,
                tex_coord=(t2, t),
            )
        yield MeshVertex(position=self.v2, normal=self.normal, tex_coord=(0.5, 1.0))


class SphericalTriangleMesh:
    """A triangular patch on a sphere centred at the origin."""

    def __init__(
        self,
        v0: Sequence[float],
        v1: Sequence[float],
        v2: Sequence[float],
        segments: int = 4,
    ) -> None:
        self.v0 = _as_vec3(v0)
        self.v1 = _as_vec3(v1)
        self.v2 = _as_vec3(v2)
        self.normal = triangle_normal(self.v0, self.v1, self.v2)
        self.segments = segments

    @classmethod
    def octant(cls, radius: float = 1.0, segments: int = 4) -> "SphericalTriangleMesh":
        """The patch spanning the positive x, y and z axes."""
        return cls(
            (radius, 0.0, 0.0),
            (0.0, radius, 0.0),
            (0.0, 0.0, radius),
            segments,
        )

    def triangles(self) -> Iterator[Triangle]:
        return _triangle_indices(self.segments)

    def vertices(self) -> Iterator[MeshVertex]:
        if self.segments < 0:
            return
        for _, t, t2 in _grid_parameters(self.segments):
            e1 = slerp(self.v0, self.v2, t)
            e2 = slerp(self.v1, self.v2, t)
            position = slerp(e1, e2, t2)
            yield MeshVertex(
                position=position,  # type: ignore[arg-type]
                normal=normalize(position),  # type: ignore[arg-type]
                tex_coord=(t2, t),
            )
        yield MeshVertex(
            position=self.v2,
            normal=normalize(self.v2),  # type: ignore[arg-type]
            tex_coord=(0.5, 1.0),
        )