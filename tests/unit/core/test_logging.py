"""
Unit tests for the JSON log formatter.
"""

import json
import logging

from opentelemetry import trace

from CatalogAdminService.settings.logging import CustomJsonFormatter


def _format(message):
    formatter = CustomJsonFormatter("%(name)s %(levelname)s %(message)s")
    record = logging.LogRecord("brands", logging.INFO, __file__, 1, message, None, None)
    return json.loads(formatter.format(record))


class TestCustomJsonFormatter:
    """Tests for CustomJsonFormatter."""

    def test_level_and_logger(self):
        """Test level and logger name are always present."""
        data = _format("Brand created")

        assert data["message"] == "Brand created"
        assert data["level"] == "INFO"
        assert data["logger"] == "brands"

    def test_no_trace_ids_outside_span(self):
        """Test records logged without an active span carry no trace ids."""
        data = _format("Brand created")

        assert "trace_id" not in data
        assert "span_id" not in data

    def test_trace_ids_inside_span(self, span_exporter):
        """Test records logged inside a span carry its trace and span ids."""
        with trace.get_tracer(__name__).start_as_current_span("create_brand") as span:
            data = _format("Brand created")
            context = span.get_span_context()

        assert data["trace_id"] == format(context.trace_id, "032x")
        assert data["span_id"] == format(context.span_id, "016x")
