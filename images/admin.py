"""
Django admin configuration for images app.
"""

from django.contrib import admin

from images.infrastructure.models import Image


@admin.register(Image)
class ImageAdmin(admin.ModelAdmin):
    """Read-only admin interface for Image rows."""

    list_display = ["url", "type", "parent_id", "created_at"]
    list_filter = ["type", "created_at"]
    search_fields = ["url", "parent_id"]
    readonly_fields = ["id", "type", "url", "parent_id", "created_at"]

    def has_add_permission(self, request):
        """Images are created through uploads only."""
        return False

    def has_change_permission(self, request, obj=None):
        """Images are never updated in place."""
        return False

    def has_delete_permission(self, request, obj=None):
        """Image rows are removed with their files through brand operations."""
        return False
