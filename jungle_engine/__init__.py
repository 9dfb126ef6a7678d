"""Core runtime pieces of a small game engine: 3D math, frustum culling, containers, names and allocation bookkeeping."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "frustum",
    "maps",
    "mathutil",
    "matrix",
    "memory",
    "names",
    "quat",
    "transforms",
    "vector",
]