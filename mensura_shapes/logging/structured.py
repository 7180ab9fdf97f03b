"""
Structured JSON Logger
======================

Bounded Context: Observability Infrastructure

Structured logger that outputs one JSON object per log record.

Design:
- JSON output (compatible with log aggregators)
- Contextual metadata (component, shape kind, measurements)
- Type-safe events (LogEvent enum)

Architecture:
- Wraps Python's logging module
- Adds structured metadata
- Formats as JSON for stderr

Example:
    >>> logger = StructuredLogger(component="registry")
    >>> logger.info(
    ...     event=LogEvent.SHAPE_CREATED,
    ...     message="Created circle",
    ...     metadata={'kind': 'circle', 'measurements': [2.0]}
    ... )

Output:
    {
        "timestamp": "2026-10-17T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "registry",
        "event": "shape.created",
        "message": "Created circle",
        "metadata": {"kind": "circle", "measurements": [2.0]}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "cli", "registry")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "cli")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: mensura.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"mensura.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        # Configure JSON formatter if not already configured
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        # inf areas serialize as Infinity; numpy values fall back to str()
        self.logger.log(
            log_level,
            json.dumps(log_entry, default=str),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Example:
            >>> logger.info(
            ...     event=LogEvent.AREA_CALCULATED,
            ...     message="Circle area calculated",
            ...     metadata={'area': 12.566}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log WARNING level message.

        Example:
            >>> logger.warning(
            ...     event=LogEvent.AREA_OVERFLOW,
            ...     message="Area overflowed",
            ...     metadata={'kind': 'triangle'}
            ... )
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance. Its type and message go under
                "exception"; the traceback rides on the LogRecord for
                handlers with their own formatter

        Example:
            >>> try:
            ...     Circle(-1)
            ... except ValueError as e:
            ...     logger.error(
            ...         event=LogEvent.CLI_ERROR,
            ...         message="Command failed",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change logging level dynamically."""
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Pass-through formatter for records produced by StructuredLogger.

    The message is already a JSON document; just emit it. Tracebacks
    attached to ERROR records are left out so each record stays one line.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


# Convenience factory function
def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("cli", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
