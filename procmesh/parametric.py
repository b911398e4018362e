"""Shapes and paths whose vertices come from a callback over [0, 1]."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Tuple

from procmesh.vertex import ShapeVertex

Edge = Tuple[int, int]


def _edges(segments: int) -> Iterator[Edge]:
    for i in range(segments):
        yield (i, i + 1)


def _vertices(evaluate: Callable[[float], Any], segments: int) -> Iterator[Any]:
    if segments <= 0:
        return
    delta = 1.0 / segments
    for i in range(segments + 1):
        yield evaluate(i * delta)


class ParametricShape:
    """A 2D shape evaluated with a callback returning a ShapeVertex.

    A segment count below one gives an empty shape.
    """

    def __init__(
        self, evaluate: Callable[[float], ShapeVertex], segments: int = 16
    ) -> None:
        self.evaluate = evaluate
        self.segments = segments

    def edges(self) -> Iterator[Edge]:
        """Edges between consecutive vertices."""
        return _edges(self.segments)

    def vertices(self) -> Iterator[ShapeVertex]:
        """Vertices evaluated at evenly spaced parameter values from 0 to 1."""
        return _vertices(self.evaluate, self.segments)


class ParametricPath:
    """A 3D path evaluated with a callback returning a path vertex.

    A segment count below one gives an empty path.
    """

    def __init__(self, evaluate: Callable[[float], Any], segments: int = 16) -> None:
        self.evaluate = evaluate
        self.segments = segments

    def edges(self) -> Iterator[Edge]:
        """Edges between consecutive vertices."""
        return _edges(self.segments)

    def vertices(self) -> Iterator[Any]:
        """Vertices evaluated at evenly spaced parameter values from 0 to 1."""
        return _vertices(self.evaluate, self.segments)