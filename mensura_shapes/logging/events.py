"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)

Event Naming Convention:
    <component>.<category>.<action>

    component: shape, triangle, registry, config, cli
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.*: Shape construction and area calculation
    - triangle.*: Triangle classification
    - registry.*: Shape kind registration
    - config.*: Configuration loading
    - cli.*: Command-line front end
    """

    # ========== Shape Events ==========
    SHAPE_CREATED = "shape.created"
    """Shape built from valid measurements."""

    SHAPE_REJECTED = "shape.rejected"
    """Measurements failed shape validation."""

    AREA_CALCULATED = "shape.area.calculated"
    """Area computed to a finite value."""

    AREA_OVERFLOW = "shape.area.overflow"
    """Area calculation overflowed to infinity."""

    # ========== Triangle Events ==========
    RIGHT_TRIANGLE_CLASSIFIED = "triangle.right.classified"
    """Right-triangle check produced a definite answer."""

    RIGHT_TRIANGLE_UNKNOWN = "triangle.right.unknown"
    """Right-triangle check overflowed, result unknown."""

    # ========== Registry Events ==========
    KIND_REGISTERED = "registry.kind.registered"
    """Shape kind added to a registry."""

    # ========== Infrastructure Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file parsed and validated."""

    CLI_ERROR = "cli.error"
    """Command failed and exited with a non-zero status."""
