"""
Django implementation of BrandRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import List, Optional, Sequence, Tuple

from asgiref.sync import sync_to_async
from django.utils import timezone

from brands.domain.brand import Brand
from brands.infrastructure.models import Brand as BrandModel
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import BrandNotFoundError
from core.domain.value_objects import BrandSlug, BrandType
from core.infrastructure.database import run_in_transaction


class DjangoBrandRepository(BrandRepository):
    """
    Django ORM implementation of BrandRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: BrandModel) -> Brand:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Brand model

        Returns:
            Brand domain entity
        """
        return Brand(
            id=model.id,
            title=model.title,
            slug=BrandSlug(model.slug),
            description=model.description,
            short_title=model.short_title,
            short_description=model.short_description,
            type=BrandType(model.type) if model.type else None,
            country_code=model.country_code,
            sort_order=model.sort_order,
            published=model.published,
            image_id=model.image_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _fields(brand: Brand) -> dict:
        return {
            "title": brand.title,
            "slug": str(brand.slug),
            "description": brand.description,
            "short_title": brand.short_title,
            "short_description": brand.short_description,
            "type": brand.type.value if brand.type else None,
            "country_code": brand.country_code,
            "sort_order": brand.sort_order,
            "published": brand.published,
            "image_id": brand.image_id,
        }

    async def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity
        """
        # pylint: disable=no-member
        model, _ = await sync_to_async(BrandModel.objects.update_or_create)(
            id=brand.id,
            defaults=self._fields(brand),
        )
        return self._to_domain(model)

    async def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand UUID

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(BrandModel.objects.get)(id=brand_id)
            return self._to_domain(model)
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def find_by_slug(self, slug: str) -> Optional[Brand]:
        """
        Find a brand by slug.

        Args:
            slug: Brand slug

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(BrandModel.objects.get)(slug=slug)
            return self._to_domain(model)
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def find_by_title(self, title: str) -> Optional[Brand]:
        """
        Find a brand by its exact title.

        Args:
            title: Brand title

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(BrandModel.objects.get)(title=title.strip())
            return self._to_domain(model)
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def exists(self, brand_id: uuid.UUID) -> bool:
        """
        Check if a brand exists.

        Args:
            brand_id: Brand UUID

        Returns:
            True if brand exists, False otherwise
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.filter(id=brand_id)
        return await sync_to_async(qs.exists)()

    async def list_all(self, published_only: bool = False) -> List[Brand]:
        """
        List brands ordered by sort order.

        Returns:
            List of Brand entities
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.order_by("sort_order", "title")
        if published_only:
            qs = qs.filter(published=True)
        models = await sync_to_async(list)(qs)
        return [self._to_domain(model) for model in models]

    async def delete(self, brand_id: uuid.UUID) -> None:
        """
        Delete a brand row.

        Args:
            brand_id: Brand UUID
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.filter(id=brand_id)
        await sync_to_async(qs.delete)()

    async def update_sort_orders(self, entries: Sequence[Tuple[uuid.UUID, int]]) -> int:
        """
        Apply sort orders as one all-or-nothing batch.

        Args:
            entries: (brand id, sort order) pairs

        Returns:
            Number of brands updated
        """

        def _apply() -> int:
            for brand_id, sort_order in entries:
                # pylint: disable=no-member
                updated = BrandModel.objects.filter(id=brand_id).update(
                    sort_order=sort_order, updated_at=timezone.now()
                )
                if not updated:
                    # Raising inside the transaction rolls back earlier updates
                    raise BrandNotFoundError(f"Brand {brand_id} not found")
            return len(entries)

        return await run_in_transaction(_apply)
