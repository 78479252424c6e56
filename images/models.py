"""
Django model registry for the images app.
"""

from images.infrastructure.models import Image  # noqa: F401
