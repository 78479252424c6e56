"""
Brand image handlers.

A brand holds at most one image. Replacing it is always
delete-old-then-create-new; bytes are never overwritten in place.
"""

import logging

from brands.application.commands.brand_image import (
    AttachBrandImageCommand,
    DetachBrandImageCommand,
)
from brands.application.dto.brand_dto import BrandDTO
from brands.application.handlers.common import get_brand_or_raise
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import MissingFileError
from core.domain.value_objects import ImageType
from images.application.commands.save_image import SaveImageCommand
from images.application.services.image_lifecycle_service import ImageLifecycleService

logger = logging.getLogger(__name__)

BRAND_IMAGE_FOLDER = "brands"


class AttachBrandImageHandler:
    """Handler for AttachBrandImageCommand."""

    def __init__(self, brand_repository: BrandRepository, image_service: ImageLifecycleService):
        """Initialize handler with the brand repository and image service."""
        self.brand_repository = brand_repository
        self.image_service = image_service

    async def handle(self, command: AttachBrandImageCommand) -> BrandDTO:
        """
        Attach an uploaded image to a brand, replacing any current one.

        Args:
            command: AttachBrandImageCommand

        Returns:
            BrandDTO with the new image populated

        Raises:
            BrandNotFoundError: If brand not found
            MissingFileError: If no file was uploaded
        """
        brand = await get_brand_or_raise(self.brand_repository, command.brand_id)
        if not command.content:
            raise MissingFileError()

        previous_image_id = brand.image_id
        if previous_image_id:
            await self.image_service.delete_images_by_ids([previous_image_id])

        image = await self.image_service.save_single_image(
            SaveImageCommand(
                content=command.content,
                original_file_name=command.original_file_name,
                folder=BRAND_IMAGE_FOLDER,
                type=ImageType.BRAND,
                parent_id=brand.id,
            )
        )

        try:
            saved = await self.brand_repository.save(brand.attach_image(image.id))
        except Exception:
            logger.error(
                "Linking image to brand failed, removing new image",
                extra={"brand_id": str(brand.id), "image_id": str(image.id)},
                exc_info=True,
            )
            await self.image_service.delete_image_by_id(image.id)
            raise

        logger.info(
            "Brand image attached",
            extra={
                "brand_id": str(saved.id),
                "image_id": str(image.id),
                "replaced_image_id": str(previous_image_id) if previous_image_id else None,
            },
        )
        return BrandDTO.from_entity(saved, image)


class DetachBrandImageHandler:
    """Handler for DetachBrandImageCommand."""

    def __init__(self, brand_repository: BrandRepository, image_service: ImageLifecycleService):
        """Initialize handler with the brand repository and image service."""
        self.brand_repository = brand_repository
        self.image_service = image_service

    async def handle(self, command: DetachBrandImageCommand) -> BrandDTO:
        """
        Remove a brand's image; a brand without one is returned unchanged.

        Args:
            command: DetachBrandImageCommand

        Returns:
            BrandDTO without image

        Raises:
            BrandNotFoundError: If brand not found
        """
        brand = await get_brand_or_raise(self.brand_repository, command.brand_id)
        if not brand.has_image:
            return BrandDTO.from_entity(brand)

        image_id = brand.image_id
        await self.image_service.delete_images_by_ids([image_id])
        saved = await self.brand_repository.save(brand.detach_image())

        logger.info(
            "Brand image detached",
            extra={"brand_id": str(saved.id), "image_id": str(image_id)},
        )
        return BrandDTO.from_entity(saved)
