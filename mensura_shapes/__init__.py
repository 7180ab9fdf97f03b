"""
mensura Shapes
==============

Bounded Context: Areas of shapes described by measurements.

Architecture:

    mensura_shapes/
    ├── geometry/          # Pure geometry (validation + area)
    │   ├── shapes.py      # Shape, Circle, Triangle
    │   └── tristate.py    # TriState (true / false / unknown)
    │
    ├── logging/           # Structured JSON logging
    │   ├── events.py      # LogEvent
    │   └── structured.py  # StructuredLogger
    │
    └── registry.py        # ShapeRegistry (kind name -> Shape class)

Usage:

    from mensura_shapes import Circle, Triangle, TriState

    Circle(2.0).area                        # 12.566...
    Triangle(3, 4, 5).area                  # 6.0
    Triangle(3, 4, 5).is_right_triangle()   # TriState.TRUE

    # Invalid measurements fail fast
    Triangle(1, 1, 3)                       # ValueError

    # Build by kind name
    from mensura_shapes import default_registry

    registry = default_registry()
    shape = registry.create("triangle", [3, 4, 5])
"""

# Geometry Layer
from mensura_shapes.geometry.shapes import Shape, Circle, Triangle, MAX_MEASUREMENT
from mensura_shapes.geometry.tristate import TriState

# Registry
from mensura_shapes.registry import ShapeRegistry, ShapeNotAvailableError, default_registry

__all__ = [
    # Geometry
    "Shape",
    "Circle",
    "Triangle",
    "MAX_MEASUREMENT",
    "TriState",
    # Registry
    "ShapeRegistry",
    "ShapeNotAvailableError",
    "default_registry",
]

__version__ = "1.0.0"
