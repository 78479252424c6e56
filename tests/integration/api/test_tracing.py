"""
Integration tests for request and handler tracing.
"""

import uuid

import pytest
from django.urls import reverse
from opentelemetry.trace import SpanKind, StatusCode


def _spans_by_name(span_exporter):
    return {span.name: span for span in span_exporter.get_finished_spans()}


@pytest.mark.django_db
@pytest.mark.integration
class TestBrandTracing:
    """Spans recorded for brand endpoints."""

    def test_create_brand_span(self, api_client, span_exporter):
        """Test the handler span is nested under the server span."""
        response = api_client.post(reverse("brands:brand-list"), {"title": "Dior"}, format="json")
        assert response.status_code == 201

        spans = _spans_by_name(span_exporter)
        handler_span = spans["create_brand"]
        server_span = spans["POST /api/v1/brands/"]

        assert handler_span.attributes["brand.id"] == response.json()["id"]
        assert handler_span.attributes["brand.slug"] == "dior"
        assert handler_span.status.status_code == StatusCode.OK
        assert handler_span.parent.span_id == server_span.context.span_id
        assert handler_span.context.trace_id == server_span.context.trace_id
        assert server_span.kind == SpanKind.SERVER
        assert server_span.attributes["http.status_code"] == 201

    def test_validation_failure_marks_span(self, api_client, span_exporter):
        """Test a rejected payload leaves an errored handler span."""
        response = api_client.post(reverse("brands:brand-list"), {}, format="json")
        assert response.status_code == 400

        handler_span = _spans_by_name(span_exporter)["create_brand"]
        assert handler_span.status.status_code == StatusCode.ERROR
        assert handler_span.attributes["error"] == "validation_failed"

    def test_missing_brand_records_exception(self, api_client, span_exporter):
        """Test a domain error raised in a handler is recorded on its span."""
        brand_id = uuid.uuid4()
        response = api_client.get(reverse("brands:brand-detail", kwargs={"brand_id": brand_id}))
        assert response.status_code == 404

        spans = _spans_by_name(span_exporter)
        handler_span = spans["get_brand"]
        assert handler_span.attributes["brand.id"] == str(brand_id)
        assert handler_span.status.status_code == StatusCode.ERROR
        assert any(event.name == "exception" for event in handler_span.events)
        assert spans["GET /api/v1/brands/{id}"].attributes["http.status_code"] == 404

    def test_image_upload_span(self, api_client, span_exporter, upload_root, png_bytes):
        """Test the upload span carries the stored image id."""
        from django.core.files.uploadedfile import SimpleUploadedFile

        brand_id = api_client.post(
            reverse("brands:brand-list"), {"title": "Chanel"}, format="json"
        ).json()["id"]
        response = api_client.patch(
            reverse("brands:brand-image", kwargs={"brand_id": brand_id}),
            {"file": SimpleUploadedFile("logo.png", png_bytes, content_type="image/png")},
            format="multipart",
        )
        assert response.status_code == 200

        upload_span = _spans_by_name(span_exporter)["upload_brand_image"]
        assert upload_span.attributes["image.id"] == response.json()["image_id"]
        assert upload_span.attributes["image.size"] == len(png_bytes)
