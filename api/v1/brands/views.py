"""
Brand API views.

These endpoints are used by the admin panel to:
- Create, update, delete and list brands
- Attach, replace and remove a brand's image
- Toggle visibility and reorder brands
"""

import logging
import uuid
from typing import Any, Dict

from asgiref.sync import async_to_sync, sync_to_async
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.brands.serializers import (
    BrandCreateRequestSerializer,
    BrandDTOSerializer,
    BrandImageUploadSerializer,
    BrandUpdateRequestSerializer,
    SortOrderRequestSerializer,
    SortResultSerializer,
    ToggleVisibilityRequestSerializer,
)
from brands.application.commands.brand_image import (
    AttachBrandImageCommand,
    DetachBrandImageCommand,
)
from brands.application.commands.brand_listing import (
    SortBrandsCommand,
    SortOrderEntry,
    ToggleBrandVisibilityCommand,
)
from brands.application.commands.manage_brand import (
    CreateBrandCommand,
    DeleteBrandCommand,
    UpdateBrandCommand,
)
from brands.application.handlers.brand_image_handlers import (
    AttachBrandImageHandler,
    DetachBrandImageHandler,
)
from brands.application.handlers.brand_lifecycle_handlers import (
    CreateBrandHandler,
    DeleteBrandHandler,
    SortBrandsHandler,
    ToggleBrandVisibilityHandler,
    UpdateBrandHandler,
)
from brands.application.handlers.brand_query_handlers import (
    GetBrandBySlugHandler,
    GetBrandHandler,
    ListBrandsHandler,
)
from brands.application.queries.brand_queries import (
    GetBrandBySlugQuery,
    GetBrandQuery,
    ListBrandsQuery,
)
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from core.domain.value_objects import BrandType
from core.instrumentation import Status, StatusCode, get_tracer
from images.application.services.image_lifecycle_service import ImageLifecycleService
from images.infrastructure.repositories.django_image_repository import DjangoImageRepository
from images.infrastructure.storage import LocalFileStorage

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

# Initialize repositories (in production, use DI container)
_brand_repo = DjangoBrandRepository()
_image_repo = DjangoImageRepository()


def _image_service() -> ImageLifecycleService:
    """Build the image service against the configured upload root."""
    return ImageLifecycleService(image_repository=_image_repo, file_storage=LocalFileStorage())


def _brand_fields(validated_data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert validated request data into entity field values."""
    fields = dict(validated_data)
    if fields.get("type"):
        fields["type"] = BrandType(fields["type"])
    return fields


def _brand_response(dto, status_code=status.HTTP_200_OK) -> Response:
    return Response(BrandDTOSerializer(dto).data, status=status_code)


def _invalid_request(span, errors) -> Response:
    """Mark the span failed and return the serializer errors."""
    span.set_attribute("error", "validation_failed")
    span.set_attribute("error.details", str(errors))
    span.set_status(Status(StatusCode.ERROR, "Validation failed"))
    return Response({"error": errors}, status=status.HTTP_400_BAD_REQUEST)


class BrandListCreateView(APIView):
    """View for listing and creating brands."""

    @extend_schema(
        operation_id="list_brands",
        summary="List Brands",
        description="List brands ordered by sort order, each with its image.",
        tags=["Brands"],
        parameters=[
            OpenApiParameter(
                name="published",
                type=bool,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Only return published brands",
            ),
        ],
        responses={200: BrandDTOSerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """List brands."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        """Async handler for list brands."""
        with tracer.start_as_current_span("list_brands") as span:
            span.set_attribute("operation", "list_brands")
            published_only = request.query_params.get("published", "").lower() in (
                "1",
                "true",
                "yes",
            )
            span.set_attribute("published_only", published_only)

            handler = ListBrandsHandler(brand_repository=_brand_repo, image_repository=_image_repo)
            result = await handler.handle(ListBrandsQuery(published_only=published_only))

            span.set_attribute("brands.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(BrandDTOSerializer(result, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_brand",
        summary="Create Brand",
        description="Create a brand. The slug is derived from the title.",
        tags=["Brands"],
        request=BrandCreateRequestSerializer,
        responses={
            201: BrandDTOSerializer,
            400: {"description": "Bad Request"},
            409: {"description": "Brand already exists"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a brand."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for create brand."""
        with tracer.start_as_current_span("create_brand") as span:
            span.set_attribute("operation", "create_brand")

            serializer = BrandCreateRequestSerializer(data=request.data)
            if not serializer.is_valid():
                return _invalid_request(span, serializer.errors)

            handler = CreateBrandHandler(brand_repository=_brand_repo)
            result = await handler.handle(
                CreateBrandCommand(**_brand_fields(serializer.validated_data))
            )

            span.set_attribute("brand.id", str(result.id))
            span.set_attribute("brand.slug", result.slug)
            span.set_status(Status(StatusCode.OK))
            return _brand_response(result, status.HTTP_201_CREATED)


class BrandSortOrderView(APIView):
    """View for reordering brands."""

    @extend_schema(
        operation_id="sort_brands",
        summary="Sort Brands",
        description="Apply new sort orders. Either every update is applied or none is.",
        tags=["Brands"],
        request=SortOrderRequestSerializer,
        responses={
            200: SortResultSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Brand not found"},
        },
    )
    def patch(self, request: Request) -> Response:
        """Reorder brands."""
        return async_to_sync(self._handle_sort)(request)

    async def _handle_sort(self, request: Request) -> Response:
        """Async handler for sort brands."""
        with tracer.start_as_current_span("sort_brands") as span:
            span.set_attribute("operation", "sort_brands")

            serializer = SortOrderRequestSerializer(data=request.data)
            if not serializer.is_valid():
                return _invalid_request(span, serializer.errors)

            command = SortBrandsCommand(
                entries=[
                    SortOrderEntry(id=item["id"], sort_order=item["sort_order"])
                    for item in serializer.validated_data["brands"]
                ]
            )
            span.set_attribute("brands.count", len(command.entries))
            result = await SortBrandsHandler(brand_repository=_brand_repo).handle(command)

            span.set_attribute("brands.updated", result.updated)
            span.set_status(Status(StatusCode.OK))
            return Response(SortResultSerializer(result).data, status=status.HTTP_200_OK)


class BrandBySlugView(APIView):
    """View for fetching a brand by slug."""

    @extend_schema(
        operation_id="get_brand_by_slug",
        summary="Get Brand by Slug",
        tags=["Brands"],
        responses={200: BrandDTOSerializer, 404: {"description": "Brand not found"}},
    )
    def get(self, request: Request, slug: str) -> Response:
        """Get a brand by slug."""
        return async_to_sync(self._handle_get)(slug)

    async def _handle_get(self, slug: str) -> Response:
        with tracer.start_as_current_span("get_brand_by_slug") as span:
            span.set_attribute("operation", "get_brand_by_slug")
            span.set_attribute("brand.slug", slug)

            handler = GetBrandBySlugHandler(
                brand_repository=_brand_repo, image_repository=_image_repo
            )
            result = await handler.handle(GetBrandBySlugQuery(slug=slug))

            span.set_status(Status(StatusCode.OK))
            return _brand_response(result)


class BrandDetailView(APIView):
    """View for reading, updating and deleting one brand."""

    @extend_schema(
        operation_id="get_brand",
        summary="Get Brand",
        tags=["Brands"],
        responses={200: BrandDTOSerializer, 404: {"description": "Brand not found"}},
    )
    def get(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Get a brand."""
        return async_to_sync(self._handle_get)(brand_id)

    async def _handle_get(self, brand_id: uuid.UUID) -> Response:
        with tracer.start_as_current_span("get_brand") as span:
            span.set_attribute("operation", "get_brand")
            span.set_attribute("brand.id", str(brand_id))

            handler = GetBrandHandler(brand_repository=_brand_repo, image_repository=_image_repo)
            result = await handler.handle(GetBrandQuery(brand_id=brand_id))

            span.set_status(Status(StatusCode.OK))
            return _brand_response(result)

    @extend_schema(
        operation_id="update_brand",
        summary="Update Brand",
        description="Update brand fields. Changing the title re-derives the slug.",
        tags=["Brands"],
        request=BrandUpdateRequestSerializer,
        responses={
            200: BrandDTOSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Brand not found"},
            409: {"description": "Title already used by another brand"},
        },
    )
    def patch(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Update a brand."""
        return async_to_sync(self._handle_update)(request, brand_id)

    async def _handle_update(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Async handler for update brand."""
        with tracer.start_as_current_span("update_brand") as span:
            span.set_attribute("operation", "update_brand")
            span.set_attribute("brand.id", str(brand_id))

            serializer = BrandUpdateRequestSerializer(data=request.data, partial=True)
            if not serializer.is_valid():
                return _invalid_request(span, serializer.errors)

            changes = _brand_fields(serializer.validated_data)
            span.set_attribute("brand.fields", sorted(changes))
            handler = UpdateBrandHandler(brand_repository=_brand_repo, image_repository=_image_repo)
            result = await handler.handle(UpdateBrandCommand(brand_id=brand_id, changes=changes))

            span.set_attribute("brand.slug", result.slug)
            span.set_status(Status(StatusCode.OK))
            return _brand_response(result)

    @extend_schema(
        operation_id="delete_brand",
        summary="Delete Brand",
        description="Delete a brand together with its image files and rows.",
        tags=["Brands"],
        responses={200: BrandDTOSerializer, 404: {"description": "Brand not found"}},
    )
    def delete(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Delete a brand."""
        return async_to_sync(self._handle_delete)(brand_id)

    async def _handle_delete(self, brand_id: uuid.UUID) -> Response:
        with tracer.start_as_current_span("delete_brand") as span:
            span.set_attribute("operation", "delete_brand")
            span.set_attribute("brand.id", str(brand_id))

            handler = DeleteBrandHandler(
                brand_repository=_brand_repo,
                image_repository=_image_repo,
                image_service=_image_service(),
            )
            result = await handler.handle(DeleteBrandCommand(brand_id=brand_id))

            span.set_status(Status(StatusCode.OK))
            return _brand_response(result)


class BrandImageView(APIView):
    """View for attaching and removing a brand's image."""

    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="upload_brand_image",
        summary="Upload Brand Image",
        description="Attach an image to a brand, replacing the current one if any.",
        tags=["Brands"],
        request={"multipart/form-data": BrandImageUploadSerializer},
        responses={
            200: BrandDTOSerializer,
            400: {"description": "No file uploaded or file too large"},
            404: {"description": "Brand not found"},
        },
    )
    def patch(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Attach an image to a brand."""
        return async_to_sync(self._handle_attach)(request, brand_id)

    async def _handle_attach(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Async handler for attach brand image."""
        with tracer.start_as_current_span("upload_brand_image") as span:
            span.set_attribute("operation", "upload_brand_image")
            span.set_attribute("brand.id", str(brand_id))

            serializer = BrandImageUploadSerializer(data=request.data)
            if not serializer.is_valid():
                return _invalid_request(span, serializer.errors)

            upload = serializer.validated_data.get("file")
            logger.debug(
                "Brand image upload received",
                extra={
                    "brand_id": str(brand_id),
                    "file_name": getattr(upload, "name", None),
                    "size": getattr(upload, "size", 0),
                },
            )
            span.set_attribute("image.size", getattr(upload, "size", 0) or 0)

            # Large uploads are spooled to disk by Django.
            content = await sync_to_async(upload.read)() if upload else None

            handler = AttachBrandImageHandler(
                brand_repository=_brand_repo, image_service=_image_service()
            )
            result = await handler.handle(
                AttachBrandImageCommand(
                    brand_id=brand_id,
                    content=content,
                    original_file_name=upload.name if upload else "",
                )
            )

            if result.image_id:
                span.set_attribute("image.id", str(result.image_id))
            span.set_status(Status(StatusCode.OK))
            return _brand_response(result)

    @extend_schema(
        operation_id="delete_brand_image",
        summary="Delete Brand Image",
        description="Remove the brand's image. A brand without an image is returned unchanged.",
        tags=["Brands"],
        request=None,
        responses={200: BrandDTOSerializer, 404: {"description": "Brand not found"}},
    )
    def delete(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Remove a brand's image."""
        return async_to_sync(self._handle_detach)(brand_id)

    async def _handle_detach(self, brand_id: uuid.UUID) -> Response:
        with tracer.start_as_current_span("delete_brand_image") as span:
            span.set_attribute("operation", "delete_brand_image")
            span.set_attribute("brand.id", str(brand_id))

            handler = DetachBrandImageHandler(
                brand_repository=_brand_repo, image_service=_image_service()
            )
            result = await handler.handle(DetachBrandImageCommand(brand_id=brand_id))

            span.set_status(Status(StatusCode.OK))
            return _brand_response(result)


class BrandVisibilityView(APIView):
    """View for publishing or hiding a brand."""

    @extend_schema(
        operation_id="toggle_brand_visibility",
        summary="Toggle Brand Visibility",
        tags=["Brands"],
        request=ToggleVisibilityRequestSerializer,
        responses={
            200: BrandDTOSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Brand not found"},
        },
    )
    def patch(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Toggle brand visibility."""
        return async_to_sync(self._handle_toggle)(request, brand_id)

    async def _handle_toggle(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Async handler for toggle visibility."""
        with tracer.start_as_current_span("toggle_brand_visibility") as span:
            span.set_attribute("operation", "toggle_brand_visibility")
            span.set_attribute("brand.id", str(brand_id))

            serializer = ToggleVisibilityRequestSerializer(data=request.data)
            if not serializer.is_valid():
                return _invalid_request(span, serializer.errors)

            is_visible = serializer.validated_data["is_visible"]
            span.set_attribute("brand.published", is_visible)
            handler = ToggleBrandVisibilityHandler(
                brand_repository=_brand_repo, image_repository=_image_repo
            )
            result = await handler.handle(
                ToggleBrandVisibilityCommand(brand_id=brand_id, is_visible=is_visible)
            )

            span.set_status(Status(StatusCode.OK))
            return _brand_response(result)
