"""
Structured Logging for mensura
==============================

Bounded Context: Observability

JSON-structured logging for the registry and the command-line front end.
The geometry layer never logs.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from mensura_shapes.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="cli")
    >>> logger.info(
    ...     event=LogEvent.AREA_CALCULATED,
    ...     message="Triangle area calculated",
    ...     metadata={'kind': 'triangle', 'area': 6.0}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
