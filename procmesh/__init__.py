"""Composable procedural shapes, paths and triangle meshes, with an SVG preview renderer."""

__version__ = "0.1.0"