"""Tests for the structured JSON logger."""

import logging

from mensura_shapes.logging import JSONFormatter, LogEvent, StructuredLogger, create_logger


class TestStructuredLogger:
    """Tests for log entry format and level handling."""

    def test_entry_format(self, structured_logger, log_handler) -> None:
        """Entries carry timestamp, level, component, event, message, metadata."""
        structured_logger.info(
            event=LogEvent.AREA_CALCULATED,
            message="circle area calculated",
            metadata={"kind": "circle", "area": 3.14},
        )

        entry = log_handler.entries[0]
        assert set(entry) == {"timestamp", "level", "component", "event", "message", "metadata"}
        assert entry["level"] == "INFO"
        assert entry["component"] == "test"
        assert entry["event"] == "shape.area.calculated"
        assert entry["metadata"] == {"kind": "circle", "area": 3.14}
        assert entry["timestamp"].endswith("+00:00")

    def test_metadata_omitted_when_empty(self, structured_logger, log_handler) -> None:
        """No metadata key without metadata."""
        structured_logger.warning(event=LogEvent.AREA_OVERFLOW, message="overflow")
        assert "metadata" not in log_handler.entries[0]

    def test_error_includes_exception_summary(self, structured_logger, log_handler) -> None:
        """error() records exception type and message."""
        structured_logger.error(
            event=LogEvent.CLI_ERROR,
            message="failed",
            exc_info=ValueError("bad radius"),
        )
        entry = log_handler.entries[0]
        assert entry["level"] == "ERROR"
        assert entry["exception"] == {"type": "ValueError", "message": "bad radius"}

    def test_error_passes_exception_to_record(self, structured_logger, log_handler) -> None:
        """The exception travels on the ERROR record; JSONFormatter keeps one line."""
        try:
            raise ValueError("bad radius")
        except ValueError as e:
            structured_logger.error(event=LogEvent.CLI_ERROR, message="failed", exc_info=e)

        record = log_handler.records[0]
        assert record.exc_info[0] is ValueError
        assert record.exc_info[2] is not None
        assert "\n" not in JSONFormatter().format(record)

    def test_exception_only_attached_to_errors(self, structured_logger, log_handler) -> None:
        """Lower levels never carry exc_info."""
        structured_logger._log("WARNING", LogEvent.SHAPE_REJECTED, "rejected", exc_info=ValueError("x"))
        assert not log_handler.records[0].exc_info

    def test_infinite_values_serialised(self, structured_logger, log_handler) -> None:
        """inf areas survive the JSON round trip."""
        structured_logger.info(
            event=LogEvent.AREA_CALCULATED, message="huge", metadata={"area": float("inf")}
        )
        assert log_handler.entries[0]["metadata"]["area"] == float("inf")

    def test_level_filtering(self, structured_logger, log_handler) -> None:
        """Records below the configured level are dropped."""
        structured_logger.set_level(logging.WARNING)
        structured_logger.debug(event=LogEvent.CONFIG_LOADED, message="debug")
        structured_logger.info(event=LogEvent.SHAPE_CREATED, message="info")
        structured_logger.warning(event=LogEvent.SHAPE_REJECTED, message="warning")
        assert log_handler.events() == ["shape.rejected"]

    def test_default_logger_name_and_handler(self) -> None:
        """create_logger names the logger mensura.<component> and adds one JSON handler."""
        logger = create_logger("unit-default", level=logging.DEBUG)
        try:
            assert logger.logger_name == "mensura.unit-default"
            assert logger.logger.level == logging.DEBUG
            assert len(logger.logger.handlers) == 1
            assert isinstance(logger.logger.handlers[0].formatter, JSONFormatter)

            # A second logger for the same component reuses the handler
            StructuredLogger(component="unit-default")
            assert len(logger.logger.handlers) == 1
        finally:
            logger.logger.handlers.clear()


class TestLogEvent:
    """Tests for event naming."""

    def test_events_are_dotted_strings(self) -> None:
        """Every event value is a lowercase dotted name."""
        for event in LogEvent:
            assert "." in event.value
            assert event.value == event.value.lower()
            assert event == event.value
