"""
mite - Flat 2D Geometry Primitives

A small geometry package built around a generic, mutable 2D point type
that works over integer and floating-point coordinates.

This package provides:
- Point construction, mutation and chaining
- Compound and scalar arithmetic
- Distance and per-axis deltas across element types
- Element type conversion
- A command-line interface for quick calculations
"""

__version__ = "0.1.0"
__license__ = "MIT"

from mite.domain.value_objects.point import Point

__all__ = [
    "Point",
]
