"""
Tracing middleware for OpenTelemetry.

Opens a server span per request so that handler spans and log lines
share one trace.
"""

from typing import Callable

from django.http import HttpRequest, HttpResponse
from opentelemetry.trace import SpanKind

from core.instrumentation import Status, StatusCode, get_tracer
from core.middleware.metrics import normalize_endpoint

tracer = get_tracer(__name__)


class TracingMiddleware:
    """Middleware to add distributed tracing to requests."""

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process request with tracing."""
        span_name = f"{request.method} {normalize_endpoint(request.path)}"
        with tracer.start_as_current_span(span_name, kind=SpanKind.SERVER) as span:
            span.set_attribute("http.method", request.method)
            span.set_attribute("http.target", request.path)

            context = span.get_span_context()
            if context.is_valid:
                request.trace_id = format(context.trace_id, "032x")  # type: ignore

            response = self.get_response(request)

            span.set_attribute("http.status_code", response.status_code)
            correlation_id = getattr(request, "correlation_id", None)
            if correlation_id:
                span.set_attribute("correlation_id", correlation_id)
            if response.status_code >= 500:
                span.set_status(Status(StatusCode.ERROR, f"HTTP {response.status_code}"))
            return response
