"""
Serializers for Brand API endpoints.
"""

from django.conf import settings
from rest_framework import serializers

from core.domain.value_objects import BrandType

BRAND_TYPE_CHOICES = [t.value for t in BrandType]


class BrandCreateRequestSerializer(serializers.Serializer):
    """Serializer for create brand request."""

    title = serializers.CharField(required=True, max_length=255)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    short_title = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=255
    )
    short_description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    type = serializers.ChoiceField(choices=BRAND_TYPE_CHOICES, required=False, allow_null=True)
    country_code = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=2
    )
    sort_order = serializers.IntegerField(required=False, default=0)
    published = serializers.BooleanField(required=False, default=False)

    def validate_title(self, value):
        """Reject titles that are only whitespace."""
        if not value.strip():
            raise serializers.ValidationError("Title cannot be blank")
        return value.strip()

    def validate_country_code(self, value):
        """Validate ISO 3166-1 alpha-2 code."""
        if not value:
            return None
        if len(value) != 2 or not value.isalpha():
            raise serializers.ValidationError("Country code must be 2 letters")
        return value.upper()


class BrandUpdateRequestSerializer(BrandCreateRequestSerializer):
    """Serializer for update brand request; every field is optional."""

    title = serializers.CharField(required=False, max_length=255)
    sort_order = serializers.IntegerField(required=False)
    published = serializers.BooleanField(required=False)


class BrandImageUploadSerializer(serializers.Serializer):
    """Serializer for brand image upload (multipart field ``file``)."""

    file = serializers.FileField(required=False, allow_empty_file=True, use_url=False)

    def validate_file(self, value):
        """Enforce the upload size limit."""
        max_size = getattr(settings, "MAX_UPLOAD_SIZE", 10 * 1024 * 1024)
        if value is not None and value.size > max_size:
            raise serializers.ValidationError(f"File exceeds {max_size} bytes")
        return value


class ToggleVisibilityRequestSerializer(serializers.Serializer):
    """Serializer for toggle visibility request."""

    is_visible = serializers.BooleanField(required=True)


class SortOrderItemSerializer(serializers.Serializer):
    """One brand position."""

    id = serializers.UUIDField()
    sort_order = serializers.IntegerField()


class SortOrderRequestSerializer(serializers.Serializer):
    """Serializer for sort order request."""

    brands = SortOrderItemSerializer(many=True, allow_empty=False)


class ImageDTOSerializer(serializers.Serializer):
    """Serializer for ImageDTO."""

    id = serializers.UUIDField()
    type = serializers.CharField()
    url = serializers.CharField()
    parent_id = serializers.UUIDField()


class BrandDTOSerializer(serializers.Serializer):
    """Serializer for BrandDTO."""

    id = serializers.UUIDField()
    title = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    short_title = serializers.CharField(allow_null=True)
    short_description = serializers.CharField(allow_null=True)
    type = serializers.CharField(allow_null=True)
    country_code = serializers.CharField(allow_null=True)
    sort_order = serializers.IntegerField()
    published = serializers.BooleanField()
    image_id = serializers.UUIDField(allow_null=True)
    image = ImageDTOSerializer(allow_null=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class SortResultSerializer(serializers.Serializer):
    """Serializer for SortResultDTO."""

    status = serializers.CharField()
    message = serializers.CharField()
    updated = serializers.IntegerField()
