"""
Image metadata model.
"""

import uuid

from django.db import models

from core.domain.value_objects import ImageType


class Image(models.Model):
    """
    One stored upload and the aggregate it was uploaded for.

    ``parent_id`` is a lookup aid, not a foreign key: the owning
    aggregate points at its image, not the other way round.
    """

    TYPE_CHOICES = [(t.value, t.name.title()) for t in ImageType]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    url = models.CharField(max_length=500, unique=True, help_text="Public path under /uploads/")
    parent_id = models.UUIDField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "images"
        db_table = "images"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["parent_id", "type"]),
        ]

    def __str__(self):
        return self.url
