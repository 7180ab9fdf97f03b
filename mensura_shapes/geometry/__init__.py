"""
Geometry Layer
==============

Bounded Context: Shapes described by measurements.

Responsibilities:
- Measurement validation (fail-fast, ValueError)
- Area calculation
- Right-triangle classification (three-valued)
- NO logging, NO registry, NO CLI

Design Philosophy:
- Pure computations, the only mutation is measurement assignment
- Overflow propagates as inf / UNKNOWN, never as an exception
"""

from mensura_shapes.geometry.shapes import Shape, Circle, Triangle, MAX_MEASUREMENT
from mensura_shapes.geometry.tristate import TriState

__all__ = [
    "Shape",
    "Circle",
    "Triangle",
    "MAX_MEASUREMENT",
    "TriState",
]
