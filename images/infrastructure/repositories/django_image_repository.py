"""
Django implementation of ImageRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import Iterable, List, Optional

from asgiref.sync import sync_to_async

from core.domain.value_objects import ImageType
from images.domain.image import Image
from images.infrastructure.models import Image as ImageModel
from images.ports.image_repository import ImageRepository


class DjangoImageRepository(ImageRepository):
    """Django ORM implementation of ImageRepository."""

    @staticmethod
    def _to_domain(model: ImageModel) -> Image:
        return Image(
            id=model.id,
            type=ImageType(model.type),
            url=model.url,
            parent_id=model.parent_id,
            created_at=model.created_at,
        )

    async def save(self, image: Image) -> Image:
        """Insert an image row; rows are never updated in place."""
        # pylint: disable=no-member
        model = await sync_to_async(ImageModel.objects.create)(
            id=image.id,
            type=image.type.value,
            url=image.url,
            parent_id=image.parent_id,
        )
        return self._to_domain(model)

    async def find_by_id(self, image_id: uuid.UUID) -> Optional[Image]:
        """Find an image by ID."""
        try:
            # pylint: disable=no-member
            model = await sync_to_async(ImageModel.objects.get)(id=image_id)
        except ImageModel.DoesNotExist:  # pylint: disable=no-member
            return None
        return self._to_domain(model)

    async def find_by_ids(self, image_ids: Iterable[uuid.UUID]) -> List[Image]:
        """Find every existing image among the given IDs."""
        ids = list(image_ids)
        if not ids:
            return []
        # pylint: disable=no-member
        qs = ImageModel.objects.filter(id__in=ids)
        models = await sync_to_async(list)(qs)
        return [self._to_domain(model) for model in models]

    async def find_by_parent(
        self, parent_id: uuid.UUID, image_type: Optional[ImageType] = None
    ) -> List[Image]:
        """Find images uploaded for an aggregate."""
        # pylint: disable=no-member
        qs = ImageModel.objects.filter(parent_id=parent_id)
        if image_type is not None:
            qs = qs.filter(type=image_type.value)
        models = await sync_to_async(list)(qs)
        return [self._to_domain(model) for model in models]

    async def delete(self, image_id: uuid.UUID) -> None:
        """Delete one image row."""
        # pylint: disable=no-member
        qs = ImageModel.objects.filter(id=image_id)
        await sync_to_async(qs.delete)()

    async def delete_many(self, image_ids: Iterable[uuid.UUID]) -> int:
        """Delete image rows in a single batch."""
        ids = list(image_ids)
        if not ids:
            return 0
        # pylint: disable=no-member
        qs = ImageModel.objects.filter(id__in=ids)
        _, per_model = await sync_to_async(qs.delete)()
        return per_model.get(ImageModel._meta.label, 0)
