"""Vectors, matrices, transforms, projections, a fly camera and mesh primitives for 3D graphics."""

__version__ = "0.1.0"