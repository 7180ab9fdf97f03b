"""Shared fixtures for mensura tests."""

import json
import logging
from typing import Any, Dict, List

import pytest

from mensura_shapes.logging import StructuredLogger


class ListHandler(logging.Handler):
    """Collects structured log entries as parsed JSON dictionaries."""

    def __init__(self) -> None:
        super().__init__()
        self.entries: List[Dict[str, Any]] = []
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)
        self.entries.append(json.loads(record.getMessage()))

    def events(self) -> List[str]:
        return [entry["event"] for entry in self.entries]


@pytest.fixture
def log_handler(request: pytest.FixtureRequest) -> ListHandler:
    """Handler attached to a logger unique to the running test."""
    logger = logging.getLogger(f"mensura.test.{request.node.name}")
    logger.propagate = False
    handler = ListHandler()
    logger.addHandler(handler)
    yield handler
    logger.removeHandler(handler)


@pytest.fixture
def structured_logger(request: pytest.FixtureRequest, log_handler: ListHandler) -> StructuredLogger:
    """StructuredLogger at DEBUG level writing into log_handler."""
    return StructuredLogger(
        component="test",
        level=logging.DEBUG,
        logger_name=f"mensura.test.{request.node.name}",
    )
