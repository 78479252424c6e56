"""
Django admin configuration for brands app.
"""

from asgiref.sync import async_to_sync
from django import forms
from django.contrib import admin
from django.utils.html import format_html

from brands.infrastructure.models import Brand
from core.domain.exceptions import InvalidInputError
from core.domain.value_objects import ImageType, generate_slug
from images.application.services.image_lifecycle_service import ImageLifecycleService
from images.infrastructure.repositories.django_image_repository import DjangoImageRepository
from images.infrastructure.storage import LocalFileStorage


class BrandAdminForm(forms.ModelForm):
    """Brand form that rejects titles whose slug is already taken."""

    class Meta:
        model = Brand
        fields = "__all__"

    def clean_title(self):
        title = self.cleaned_data["title"].strip()
        try:
            slug = generate_slug(title)
        except InvalidInputError as e:
            raise forms.ValidationError(str(e))

        clash = Brand.objects.filter(slug=slug).exclude(pk=self.instance.pk)
        if clash.exists():
            raise forms.ValidationError(f"Brand with slug '{slug}' already exists")
        return title


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    """Admin interface for Brand model."""

    form = BrandAdminForm
    list_display = [
        "title",
        "slug",
        "type",
        "country_code",
        "sort_order",
        "published",
        "image_preview",
    ]
    list_filter = ["published", "type", "created_at"]
    list_editable = ["sort_order", "published"]
    search_fields = ["title", "slug", "short_title"]
    readonly_fields = ["id", "slug", "image", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "title", "slug", "short_title", "type", "country_code"),
            },
        ),
        (
            "Descriptions",
            {
                "fields": ("description", "short_description"),
            },
        ),
        (
            "Listing",
            {
                "fields": ("sort_order", "published", "image"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("image")

    @admin.display(description="Image")
    def image_preview(self, obj):
        """Show a thumbnail of the brand image."""
        if not obj.image:
            return "-"
        return format_html('<img src="{}" style="max-height: 40px;" />', obj.image.url)

    def save_model(self, request, obj, form, change):
        """Derive the slug from the title on every save."""
        obj.title = obj.title.strip()
        obj.slug = generate_slug(obj.title)
        if obj.country_code:
            obj.country_code = obj.country_code.upper()
        super().save_model(request, obj, form, change)

    def delete_model(self, request, obj):
        """Delete the brand together with its image files."""
        brand_id = obj.pk
        super().delete_model(request, obj)
        _delete_brand_images([brand_id])

    def delete_queryset(self, request, queryset):
        """Bulk delete brands together with their image files."""
        brand_ids = list(queryset.values_list("pk", flat=True))
        super().delete_queryset(request, queryset)
        _delete_brand_images(brand_ids)


def _delete_brand_images(brand_ids):
    service = ImageLifecycleService(
        image_repository=DjangoImageRepository(), file_storage=LocalFileStorage()
    )
    for brand_id in brand_ids:
        async_to_sync(service.delete_images_by_parent)(brand_id, ImageType.BRAND)
