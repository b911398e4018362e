"""Path vertices and the generators that combine and transform 3D paths."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Callable, Iterator, Protocol, Sequence, Tuple, Union

from procmesh.vertex import Axis, Vec3, count, cross, mix, normalize, rotate

Edge = Tuple[int, int]


@dataclass(frozen=True)
class PathVertex:
    """A point on a path with its local coordinate frame."""

    position: Vec3 = (0.0, 0.0, 0.0)
    tangent: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    tex_coord: float = 0.0

    def binormal(self) -> Vec3:
        """Cross product of the tangent and the normal."""
        return cross(self.tangent, self.normal)


class _Path(Protocol):
    def edges(self) -> Iterator[Edge]: ...

    def vertices(self) -> Iterator[PathVertex]: ...


class EmptyPath:
    """A path with no vertices and no edges."""

    def edges(self) -> Iterator[Edge]:
        return iter(())

    def vertices(self) -> Iterator[PathVertex]:
        return iter(())


class TransformPath:
    """Applies a function to every vertex of a path.

    The function receives a PathVertex and returns the replacement vertex.
    """

    def __init__(self, path: _Path, mutate: Callable[[PathVertex], PathVertex]) -> None:
        self.path = path
        self.mutate = mutate

    def edges(self) -> Iterator[Edge]:
        return self.path.edges()

    def vertices(self) -> Iterator[PathVertex]:
        for vertex in self.path.vertices():
            yield self.mutate(vertex)


def _swap(v: Sequence[float], order: Tuple[Axis, Axis, Axis]) -> Vec3:
    x, y, z = order
    return (v[x], v[y], v[z])


class AxisSwapPath:
    """Reorders the axes of positions, tangents and normals of a path."""

    def __init__(self, path: _Path, x: Axis, y: Axis, z: Axis) -> None:
        order = (Axis(x), Axis(y), Axis(z))
        self.path = path
        self.order = order

        def swap(vertex: PathVertex) -> PathVertex:
            return dataclasses.replace(
                vertex,
                position=_swap(vertex.position, order),
                tangent=_swap(vertex.tangent, order),
                normal=_swap(vertex.normal, order),
            )

        self._transform = TransformPath(path, swap)

    def edges(self) -> Iterator[Edge]:
        return self._transform.edges()

    def vertices(self) -> Iterator[PathVertex]:
        return self._transform.vertices()


class RotatePath:
    """Rotates the positions and normals of a path around an axis."""

    def __init__(
        self, path: _Path, angle: float, axis: Union[Axis, Sequence[float]]
    ) -> None:
        self.path = path
        self.angle = angle
        self.axis = axis

        def turn(vertex: PathVertex) -> PathVertex:
            return dataclasses.replace(
                vertex,
                position=rotate(vertex.position, angle, axis),
                normal=rotate(vertex.normal, angle, axis),
            )

        self._transform = TransformPath(path, turn)

    def edges(self) -> Iterator[Edge]:
        return self._transform.edges()

    def vertices(self) -> Iterator[PathVertex]:
        return self._transform.vertices()


class MergePath:
    """Concatenates several paths into one."""

    def __init__(self, *paths: _Path) -> None:
        self.paths = paths

    def edges(self) -> Iterator[Edge]:
        offset = 0
        for path in self.paths:
            for a, b in path.edges():
                yield (a + offset, b + offset)
            offset += count(path.vertices())

    def vertices(self) -> Iterator[PathVertex]:
        for path in self.paths:
            yield from path.vertices()


def _midpoint(v1: PathVertex, v2: PathVertex) -> PathVertex:
    return PathVertex(
        position=mix(v1.position, v2.position, 0.5),  # type: ignore[arg-type]
        tangent=normalize(mix(v1.tangent, v2.tangent, 0.5)),  # type: ignore[arg-type]
        normal=normalize(mix(v1.normal, v2.normal, 0.5)),  # type: ignore[arg-type]
        tex_coord=0.5 * v1.tex_coord + 0.5 * v2.tex_coord,
    )


class SubdividePath:
    """Cuts every edge of a path in half.

    The original vertices come first, followed by one midpoint per edge.
    """

    def __init__(self, path: _Path) -> None:
        self.path = path
        self._cache: Tuple[PathVertex, ...] = tuple(path.vertices())

    def edges(self) -> Iterator[Edge]:
        n = len(self._cache)
        for k, (a, b) in enumerate(self.path.edges()):
            yield (a, n + k)
            yield (n + k, b)

    def vertices(self) -> Iterator[PathVertex]:
        yield from self._cache
        for a, b in self.path.edges():
            yield _midpoint(self._cache[a], self._cache[b])