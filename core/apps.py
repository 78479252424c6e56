"""
Django app configuration for core.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Core app; installs tracing once apps are ready."""

    name = "core"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        """Setup observability after apps are ready."""
        from core.instrumentation import setup_opentelemetry

        setup_opentelemetry()
