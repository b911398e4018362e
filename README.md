# procmesh

Procedural geometry in plain Python. The package builds shapes (2D outlines),
paths (3D curves that carry a moving frame) and meshes (triangles over vertices)
from small pieces that you combine. Each primitive provides lazy iterators over
its edges or triangles and over its vertices. Only the standard library is
required.

## Installation

```
pip install procmesh
```

## Concepts

- **Shapes** produce `ShapeVertex` values. Each has a 2D `position`, a unit
  `tangent` and a `tex_coord`. `ShapeVertex.normal()` returns the tangent rotated
  90° clockwise. The edges of a shape are `(i, j)` pairs of vertex indices.
- **Paths** produce `PathVertex` values. Each has a 3D `position`, `tangent` and
  `normal`, plus a `tex_coord`. `PathVertex.binormal()` returns
  `cross(tangent, normal)`.
- **Meshes** produce `MeshVertex` values (`position`, `normal`, `tex_coord`) and
  triangles, which are `(a, b, c)` triples of vertex indices.

Every primitive has `vertices()`. Shapes and paths also have `edges()`, and meshes
have `triangles()`. Each call returns a new iterator, so a primitive can be
iterated any number of times. `count(iterable)` returns the number of items an
iterator yields.

## Modules

| Module | Contents |
| --- | --- |
| `procmesh.vertex` | `Axis`, `MeshVertex`, `ShapeVertex`; vector helpers `dot`, `cross`, `normalize`, `mix`, `slerp`, `triangle_normal`, `rotate`; `count` |
| `procmesh.parametric` | `ParametricShape`, `ParametricPath`. Each calls a function at `segments + 1` evenly spaced `t` in [0, 1]. If `segments` is below one, the result is empty. |
| `procmesh.shapes` | `TranslateShape`, `ScaleShape` (keeps tangents at unit length) |
| `procmesh.triangles` | `TriangleMesh` (flat, with `TriangleMesh.regular`), `SphericalTriangleMesh` (with `SphericalTriangleMesh.octant`) |
| `procmesh.paths` | `PathVertex`, `EmptyPath`, `TransformPath`, `AxisSwapPath`, `RotatePath`, `MergePath`, `SubdividePath` |
| `procmesh.sweep` | `LatheMesh` spins a shape around an axis in the xy-plane. `ExtrudeMesh` sweeps a shape along a path. |
| `procmesh.modifiers` | `TranslateMesh`, `RotateMesh`, `UvFlipMesh`, `AxisFlipMesh`, `MirrorMesh`, `RepeatMesh` |
| `procmesh.svg` | `SvgWriter`, a small software renderer that produces an SVG document |

`normalize` raises `ValueError` when given a zero-length vector.

## Examples

Subdivide a spherical patch, mirror it, then move it:

```python
from procmesh.modifiers import MirrorMesh, TranslateMesh
from procmesh.triangles import SphericalTriangleMesh
from procmesh.vertex import Axis, count

octant = SphericalTriangleMesh.octant(1.0, 4)
print(count(octant.vertices()), count(octant.triangles()))

mesh = TranslateMesh(MirrorMesh(octant, Axis.X), (0.0, 0.0, 2.0))
for a, b, c in mesh.triangles():
    ...
```

Turn a circular outline around the y axis to make a torus-like ring:

```python
import math

from procmesh.parametric import ParametricShape
from procmesh.sweep import LatheMesh
from procmesh.vertex import Axis, ShapeVertex


def circle(t: float) -> ShapeVertex:
    angle = t * 2.0 * math.pi
    return ShapeVertex(
        position=(1.0 + 0.25 * math.cos(angle), 0.25 * math.sin(angle)),
        tangent=(-math.sin(angle), math.cos(angle)),
        tex_coord=t,
    )


ring = LatheMesh(ParametricShape(circle, 16), Axis.Y, slices=32)
```

## Rendering a preview

```python
from procmesh.svg import SvgWriter
from procmesh.triangles import TriangleMesh

writer = SvgWriter(400, 400)
writer.ortho(-1.5, 1.5, -1.5, 1.5)

mesh = TriangleMesh.regular(1.0, 4)
positions = [v.position for v in mesh.vertices()]
for a, b, c in mesh.triangles():
    writer.write_triangle(positions[a], positions[b], positions[c])

with open("triangle.svg", "w") as out:
    out.write(writer.to_svg())
```

If `write_triangle` gets no colour, it shades the triangle in grey according to
the triangle's normal. It skips triangles with repeated corners. While face
culling is on, which is the default, it also skips triangles that face away from
the viewer. `write_line` skips lines whose two end points are the same.

Matrices passed to `model_view` are given as four rows and multiply column
vectors. `perspective` takes its field of view in radians. `SvgWriter` also
provides `viewport`, `cullface` and `write_point`. `to_svg()` writes the elements
from farthest to nearest.

## What is not included

procmesh has building blocks, modifiers and sweeps. It does not ship finished
solids such as boxes, spheres, cylinders or tori, or ready-made circle and line
shapes. You build these yourself from `ParametricShape`, `ParametricPath`,
`LatheMesh` and `ExtrudeMesh`. The only output format is the SVG preview from
`SvgWriter`. There is no writer for mesh file formats, and there is no
command-line tool.