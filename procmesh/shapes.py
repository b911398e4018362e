"""Transformations applied to the vertices of 2D shapes."""

from __future__ import annotations

import dataclasses
from typing import Iterator, Protocol, Sequence, Tuple

from procmesh.vertex import ShapeVertex, Vec2, normalize

Edge = Tuple[int, int]


class _Shape(Protocol):
    def edges(self) -> Iterator[Edge]: ...

    def vertices(self) -> Iterator[ShapeVertex]: ...


class TranslateShape:
    """Moves every vertex of a shape by a fixed offset."""

    def __init__(self, shape: _Shape, delta: Sequence[float]) -> None:
        self.shape = shape
        dx, dy = delta
        self.delta: Vec2 = (float(dx), float(dy))

    def edges(self) -> Iterator[Edge]:
        return self.shape.edges()

    def vertices(self) -> Iterator[ShapeVertex]:
        dx, dy = self.delta
        for vertex in self.shape.vertices():
            x, y = vertex.position
            yield dataclasses.replace(vertex, position=(x + dx, y + dy))


class ScaleShape:
    """Scales a shape per axis while keeping tangents unit length."""

    def __init__(self, shape: _Shape, scale: Sequence[float]) -> None:
        self.shape = shape
        sx, sy = scale
        self.scale: Vec2 = (float(sx), float(sy))

    def edges(self) -> Iterator[Edge]:
        return self.shape.edges()

    def vertices(self) -> Iterator[ShapeVertex]:
        sx, sy = self.scale
        for vertex in self.shape.vertices():
            x, y = vertex.position
            tx, ty = vertex.tangent
            yield dataclasses.replace(
                vertex,
                position=(x * sx, y * sy),
                tangent=normalize((tx * sx, ty * sy)),
            )