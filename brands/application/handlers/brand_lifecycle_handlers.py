"""
Brand lifecycle handlers.

Handles create, update, delete, visibility and sort order commands.
"""

import logging
from typing import Optional

from brands.application.commands.brand_listing import (
    SortBrandsCommand,
    ToggleBrandVisibilityCommand,
)
from brands.application.commands.manage_brand import (
    CreateBrandCommand,
    DeleteBrandCommand,
    UpdateBrandCommand,
)
from brands.application.dto.brand_dto import BrandDTO, SortResultDTO
from brands.application.handlers.common import get_brand_or_raise, to_brand_dto
from brands.domain.brand import Brand
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import BrandAlreadyExistsError
from core.domain.value_objects import BrandSlug, ImageType
from core.metrics import brands_created_total, brands_deleted_total
from images.application.services.image_lifecycle_service import ImageLifecycleService
from images.ports.image_repository import ImageRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "short_title",
        "short_description",
        "type",
        "country_code",
        "sort_order",
        "published",
    }
)


async def _ensure_unique(
    brand_repository: BrandRepository,
    title: str,
    slug: BrandSlug,
    current: Optional[Brand] = None,
) -> None:
    """Fail if another brand already uses this title or slug."""
    by_title = await brand_repository.find_by_title(title)
    if by_title and (current is None or by_title.id != current.id):
        raise BrandAlreadyExistsError(f"Brand with title '{title}' already exists")

    by_slug = await brand_repository.find_by_slug(str(slug))
    if by_slug and (current is None or by_slug.id != current.id):
        raise BrandAlreadyExistsError(f"Brand with slug '{slug}' already exists")


class CreateBrandHandler:
    """Handler for CreateBrandCommand."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository

    async def handle(self, command: CreateBrandCommand) -> BrandDTO:
        """
        Handle create brand command.

        Args:
            command: CreateBrandCommand

        Returns:
            BrandDTO of the new brand

        Raises:
            BrandAlreadyExistsError: If the title or derived slug is taken
            InvalidInputError: If no slug can be derived from the title
        """
        brand = Brand.create(
            title=command.title,
            description=command.description,
            short_title=command.short_title,
            short_description=command.short_description,
            type=command.type,
            country_code=command.country_code,
            sort_order=command.sort_order,
            published=command.published,
        )
        await _ensure_unique(self.brand_repository, brand.title, brand.slug)

        saved = await self.brand_repository.save(brand)

        brands_created_total.inc()
        logger.info(
            "Brand created",
            extra={"brand_id": str(saved.id), "title": saved.title, "slug": str(saved.slug)},
        )
        return BrandDTO.from_entity(saved)


class UpdateBrandHandler:
    """Handler for UpdateBrandCommand."""

    def __init__(self, brand_repository: BrandRepository, image_repository: ImageRepository):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.image_repository = image_repository

    async def handle(self, command: UpdateBrandCommand) -> BrandDTO:
        """
        Handle update brand command.

        Args:
            command: UpdateBrandCommand

        Returns:
            Updated BrandDTO

        Raises:
            BrandNotFoundError: If brand not found
            BrandAlreadyExistsError: If the new title or slug belongs to another brand
        """
        brand = await get_brand_or_raise(self.brand_repository, command.brand_id)

        changes = {k: v for k, v in command.changes.items() if k in UPDATABLE_FIELDS}
        updated = brand.update_details(**changes)
        if updated.title != brand.title:
            await _ensure_unique(self.brand_repository, updated.title, updated.slug, brand)

        saved = await self.brand_repository.save(updated)
        logger.info(
            "Brand updated",
            extra={"brand_id": str(saved.id), "fields": sorted(changes)},
        )
        return await to_brand_dto(saved, self.image_repository)


class DeleteBrandHandler:
    """Handler for DeleteBrandCommand."""

    def __init__(
        self,
        brand_repository: BrandRepository,
        image_repository: ImageRepository,
        image_service: ImageLifecycleService,
    ):
        """Initialize handler with repositories and the image service."""
        self.brand_repository = brand_repository
        self.image_repository = image_repository
        self.image_service = image_service

    async def handle(self, command: DeleteBrandCommand) -> BrandDTO:
        """
        Delete a brand, then every image uploaded for it.

        Args:
            command: DeleteBrandCommand

        Returns:
            BrandDTO of the deleted brand

        Raises:
            BrandNotFoundError: If brand not found
        """
        brand = await get_brand_or_raise(self.brand_repository, command.brand_id)
        dto = await to_brand_dto(brand, self.image_repository)

        await self.brand_repository.delete(brand.id)
        await self.image_service.delete_images_by_parent(brand.id, ImageType.BRAND)

        brands_deleted_total.inc()
        logger.info("Brand deleted", extra={"brand_id": str(brand.id), "title": brand.title})
        return dto


class ToggleBrandVisibilityHandler:
    """Handler for ToggleBrandVisibilityCommand."""

    def __init__(self, brand_repository: BrandRepository, image_repository: ImageRepository):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.image_repository = image_repository

    async def handle(self, command: ToggleBrandVisibilityCommand) -> BrandDTO:
        """
        Set a brand's ``published`` flag.

        Raises:
            BrandNotFoundError: If brand not found
        """
        brand = await get_brand_or_raise(self.brand_repository, command.brand_id)
        saved = await self.brand_repository.save(brand.set_visibility(command.is_visible))
        logger.info(
            "Brand visibility changed",
            extra={"brand_id": str(saved.id), "published": saved.published},
        )
        return await to_brand_dto(saved, self.image_repository)


class SortBrandsHandler:
    """Handler for SortBrandsCommand."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository

    async def handle(self, command: SortBrandsCommand) -> SortResultDTO:
        """
        Apply every sort order or none of them.

        Raises:
            BrandNotFoundError: If any brand id is unknown
        """
        updated = await self.brand_repository.update_sort_orders(
            [(entry.id, entry.sort_order) for entry in command.entries]
        )
        logger.info("Brands sorted", extra={"updated": updated})
        return SortResultDTO(
            status="success",
            message="Brands sorted successfully",
            updated=updated,
        )
