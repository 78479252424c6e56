"""
OpenTelemetry instrumentation setup.

Tracers handed out by ``get_tracer`` are proxies: until ``setup_opentelemetry``
installs an SDK provider, spans are non-recording and cost nothing.
"""

import logging
import os

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import Status, StatusCode  # noqa: F401

logger = logging.getLogger(__name__)


def setup_opentelemetry() -> bool:
    """
    Configure tracing export when an OTLP endpoint is configured.

    Sets up:
    - A tracer provider tagged with service name, version and environment
    - OTLP export of spans (batching)

    Returns:
        True if a provider was installed
    """
    endpoint = os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT")
    if not endpoint:
        logger.info("OTEL_EXPORTER_OTLP_ENDPOINT not set, tracing export disabled")
        return False

    resource = Resource.create(
        {
            "service.name": os.environ.get("OTEL_SERVICE_NAME", "catalog-admin-service"),
            "service.version": os.environ.get("OTEL_SERVICE_VERSION", "1.0.0"),
            "deployment.environment": os.environ.get("ENVIRONMENT", "development"),
        }
    )

    provider = TracerProvider(resource=resource)
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(
                endpoint=endpoint,
                insecure=os.environ.get("OTEL_EXPORTER_OTLP_INSECURE", "true") == "true",
            )
        )
    )
    trace.set_tracer_provider(provider)

    logger.info("OpenTelemetry instrumentation configured", extra={"endpoint": endpoint})
    return True


def get_tracer(name: str) -> trace.Tracer:
    """
    Get a tracer instance for manual instrumentation.

    Args:
        name: Tracer name (usually module name)

    Returns:
        Tracer instance
    """
    return trace.get_tracer(name)

