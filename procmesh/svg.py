"""A minimal software renderer that writes points, lines and triangles as SVG."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from procmesh.vertex import Vec3, cross, dot, normalize, triangle_normal

Matrix = Tuple[Tuple[float, float, float, float], ...]

_IDENTITY: Matrix = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def _as_matrix(rows: Sequence[Sequence[float]]) -> Matrix:
    matrix = tuple(tuple(float(c) for c in row) for row in rows)
    if len(matrix) != 4 or any(len(row) != 4 for row in matrix):
        raise ValueError("expected a 4x4 matrix")
    return matrix  # type: ignore[return-value]


def _matmul(a: Matrix, b: Matrix) -> Matrix:
    columns = list(zip(*b))
    return tuple(tuple(dot(row, col) for col in columns) for row in a)  # type: ignore[return-value]


def _num(value: float) -> str:
    return f"{value:g}"


def _to_color(color: Sequence[float]) -> str:
    r, g, b = (int(255 * min(max(c, 0.0), 1.0)) for c in color)
    return f"rgb({r},{g},{b})"


@dataclass(frozen=True)
class _Point:
    z: float
    color: Vec3
    p: Vec3

    def render(self) -> str:
        return (
            f'<circle cx="{_num(self.p[0])}" cy="{_num(self.p[1])}" '
            f'r="3" style="fill: {_to_color(self.color)}" />\n'
        )


@dataclass(frozen=True)
class _Line:
    z: float
    color: Vec3
    p1: Vec3
    p2: Vec3

    def render(self) -> str:
        return (
            f'<line x1="{_num(self.p1[0])}" y1="{_num(self.p1[1])}" '
            f'x2="{_num(self.p2[0])}" y2="{_num(self.p2[1])}" '
            f'style="stroke: {_to_color(self.color)};" />\n'
        )


@dataclass(frozen=True)
class _Polygon:
    z: float
    color: Vec3
    points: Tuple[Vec3, Vec3, Vec3]

    def render(self) -> str:
        coords = "".join(f"{_num(p[0])},{_num(p[1])} " for p in self.points)
        return (
            f'<polygon points="{coords}" '
            f'style="fill: {_to_color(self.color)};" />\n'
        )


class SvgWriter:
    """Projects 3D primitives to 2D and renders them, far ones first, as SVG.

    Matrices are given as four rows and multiply column vectors.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._view: Matrix = _IDENTITY
        self._proj: Matrix = _IDENTITY
        self._view_proj: Matrix = _IDENTITY
        self._viewport_origin: Tuple[int, int] = (0, 0)
        self._viewport_size: Tuple[int, int] = (width, height)
        self._light_dir: Vec3 = normalize((1.0, 2.0, 3.0))  # type: ignore[assignment]
        self._cullface = True
        self._elems: List[object] = []

    def model_view(self, matrix: Sequence[Sequence[float]]) -> None:
        """Set the model-view matrix."""
        self._view = _as_matrix(matrix)
        self._view_proj = _matmul(self._proj, self._view)

    def perspective(self, fovy: float, aspect: float, z_near: float, z_far: float) -> None:
        """Use a perspective projection; ``fovy`` is in radians."""
        f = 1.0 / math.tan(fovy / 2.0)
        depth = z_near - z_far
        self._proj = (
            (f / aspect, 0.0, 0.0, 0.0),
            (0.0, f, 0.0, 0.0),
            (0.0, 0.0, (z_far + z_near) / depth, 2.0 * z_far * z_near / depth),
            (0.0, 0.0, -1.0, 0.0),
        )
        self._view_proj = _matmul(self._proj, self._view)

    def ortho(self, left: float, right: float, bottom: float, top: float) -> None:
        """Use a 2D orthographic projection."""
        width = right - left
        height = top - bottom
        self._proj = (
            (2.0 / width, 0.0, 0.0, -(right + left) / width),
            (0.0, 2.0 / height, 0.0, -(top + bottom) / height),
            (0.0, 0.0, -1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
        self._view_proj = _matmul(self._proj, self._view)

    def viewport(self, x: int, y: int, width: int, height: int) -> None:
        """Set the area of the image the projection maps onto."""
        self._viewport_origin = (x, y)
        self._viewport_size = (width, height)

    def cullface(self, enabled: bool) -> None:
        """Enable or disable dropping of back-facing triangles."""
        self._cullface = enabled

    def _project(self, p: Sequence[float]) -> Vec3:
        x, y, z = p
        clip = [dot(row, (x, y, z, 1.0)) for row in self._view_proj]
        w = clip[3]
        nx, ny, nz = (c / w * 0.5 + 0.5 for c in clip[:3])
        ox, oy = self._viewport_origin
        vw, vh = self._viewport_size
        return (nx * vw + ox, self.height - (ny * vh + oy), nz)

    def _normal_to_color(self, normal: Sequence[float]) -> Vec3:
        d = min(max(dot(normal, self._light_dir), 0.0), 1.0)
        d = 0.1 + 0.8 * d
        return (d, d, d)

    def write_point(self, p: Sequence[float], color: Sequence[float]) -> None:
        """Draw a small filled circle at ``p``."""
        pp = self._project(p)
        self._elems.append(_Point(pp[2], tuple(color), pp))  # type: ignore[arg-type]

    def write_line(
        self, p1: Sequence[float], p2: Sequence[float], color: Sequence[float]
    ) -> None:
        """Draw a line; a line between equal points is skipped."""
        if tuple(p1) == tuple(p2):
            return
        pp1 = self._project(p1)
        pp2 = self._project(p2)
        self._elems.append(
            _Line((pp1[2] + pp2[2]) / 2.0, tuple(color), pp1, pp2)  # type: ignore[arg-type]
        )

    def write_triangle(
        self,
        p1: Sequence[float],
        p2: Sequence[float],
        p3: Sequence[float],
        color: Optional[Sequence[float]] = None,
    ) -> None:
        """Draw a filled triangle.

        Without a colour it is shaded from its normal. Triangles with
        repeated corners are skipped, and so are back faces when culling is on.
        """
        a, b, c = tuple(p1), tuple(p2), tuple(p3)
        if a == b or b == c or a == c:
            return
        if color is None:
            try:
                normal = triangle_normal(a, b, c)
            except ValueError:
                normal = (0.0, 0.0, 0.0)
            color = self._normal_to_color(normal)

        pp1 = self._project(a)
        pp2 = self._project(b)
        pp3 = self._project(c)

        if self._cullface:
            edge1 = tuple(q - p for p, q in zip(pp1, pp2))
            edge2 = tuple(q - p for p, q in zip(pp1, pp3))
            if cross(edge1, edge2)[2] > 0.0:
                return

        z = (pp1[2] + pp2[2] + pp3[2]) / 3.0
        self._elems.append(_Polygon(z, tuple(color), (pp1, pp2, pp3)))  # type: ignore[arg-type]

    def to_svg(self) -> str:
        """The SVG document with all primitives, farthest first."""
        parts = [
            f'<svg width="{self.width}" height="{self.height}" version="1.1" '
            'xmlns="http://www.w3.org/2000/svg">\n',
            f'<rect width="{self.width}" height="{self.height}" '
            'style="fill:white"/>\n',
        ]
        parts.extend(
            elem.render()  # type: ignore[attr-defined]
            for elem in sorted(self._elems, key=lambda e: -e.z)  # type: ignore[attr-defined]
        )
        parts.append("</svg>\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_svg()