"""
Brand model.
"""

import uuid

from django.db import models

from core.domain.value_objects import BrandType


class Brand(models.Model):
    """
    Represents a catalog brand (e.g., Dior, Chanel).
    A brand references at most one image.
    """

    TYPE_CHOICES = [(t.value, t.name.replace("_", " ").title()) for t in BrandType]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255, unique=True, help_text="Brand display title")
    slug = models.SlugField(
        max_length=255,
        unique=True,
        help_text="URL-safe identifier derived from the title",
    )
    description = models.TextField(null=True, blank=True)
    short_title = models.CharField(max_length=255, null=True, blank=True)
    short_description = models.TextField(null=True, blank=True)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, null=True, blank=True)
    country_code = models.CharField(
        max_length=2,
        null=True,
        blank=True,
        help_text="ISO 3166-1 alpha-2 country code",
    )
    sort_order = models.IntegerField(default=0)
    published = models.BooleanField(default=False)
    image = models.OneToOneField(
        "images.Image",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="brand",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "brands"
        db_table = "brands"
        ordering = ["sort_order", "title"]
        indexes = [
            models.Index(fields=["sort_order"]),
            models.Index(fields=["published"]),
        ]

    def __str__(self):
        return self.title
