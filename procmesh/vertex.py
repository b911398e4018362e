"""Vertex types, coordinate axes and the small vector helpers used by the generators."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Sequence, Tuple, Union

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


class Axis(IntEnum):
    """A coordinate axis; the value is the component index."""

    X = 0
    Y = 1
    Z = 2

    @property
    def unit(self) -> Vec3:
        """Unit vector pointing along this axis."""
        return tuple(1.0 if i == self.value else 0.0 for i in range(3))  # type: ignore[return-value]


@dataclass(frozen=True)
class MeshVertex:
    """A vertex of a triangle mesh."""

    position: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    tex_coord: Vec2 = (0.0, 0.0)


@dataclass(frozen=True)
class ShapeVertex:
    """A point on a 2D shape with its unit tangent and texture coordinate."""

    position: Vec2 = (0.0, 0.0)
    tangent: Vec2 = (0.0, 0.0)
    tex_coord: float = 0.0

    def normal(self) -> Vec2:
        """The tangent rotated 90 degrees clockwise."""
        tx, ty = self.tangent
        return (ty, -tx)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two vectors of equal length."""
    return sum(x * y for x, y in zip(a, b, strict=True))


def cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Cross product of two 3D vectors."""
    ax, ay, az = a
    bx, by, bz = b
    return (ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def normalize(v: Sequence[float]) -> Tuple[float, ...]:
    """Return ``v`` scaled to unit length.

    Raises ValueError for a zero-length vector.
    """
    length = math.sqrt(dot(v, v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return tuple(x / length for x in v)


def mix(a: Sequence[float], b: Sequence[float], t: float) -> Tuple[float, ...]:
    """Linear interpolation between ``a`` (t=0) and ``b`` (t=1)."""
    return tuple(x * (1.0 - t) + y * t for x, y in zip(a, b, strict=True))


def slerp(a: Sequence[float], b: Sequence[float], t: float) -> Tuple[float, ...]:
    """Spherical linear interpolation between ``a`` (t=0) and ``b`` (t=1)."""
    lengths = math.sqrt(dot(a, a)) * math.sqrt(dot(b, b))
    if lengths == 0.0:
        return mix(a, b, t)
    cosine = max(-1.0, min(1.0, dot(a, b) / lengths))
    theta = math.acos(cosine)
    sine = math.sin(theta)
    if sine < 1e-12:
        return mix(a, b, t)
    wa = math.sin((1.0 - t) * theta) / sine
    wb = math.sin(t * theta) / sine
    return tuple(wa * x + wb * y for x, y in zip(a, b, strict=True))


def triangle_normal(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> Vec3:
    """Unit normal of the triangle ``a, b, c`` (counterclockwise front face)."""
    ab = tuple(y - x for x, y in zip(a, b, strict=True))
    ac = tuple(y - x for x, y in zip(a, c, strict=True))
    return normalize(cross(ab, ac))  # type: ignore[return-value]


def rotate(v: Sequence[float], angle: float, axis: Union[Axis, Sequence[float]]) -> Vec3:
    """Rotate ``v`` counterclockwise by ``angle`` radians around ``axis``."""
    k = axis.unit if isinstance(axis, Axis) else normalize(axis)
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    kxv = cross(k, v)
    kdv = dot(k, v)
    return tuple(
        vi * cos_a + ci * sin_a + ki * kdv * (1.0 - cos_a)
        for vi, ci, ki in zip(v, kxv, k)
    )  # type: ignore[return-value]


def count(iterable: Iterable[object]) -> int:
    """Number of items an iterable produces."""
    return sum(1 for _ in iterable)