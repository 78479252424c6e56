"""
Image lifecycle service.

Keeps stored files and Image rows in step:
- saving writes the file first, then inserts the row, so a crash in
  between leaves a stray file rather than a row pointing at nothing
- deleting removes files first (best effort), then the rows
"""

import asyncio
import logging
import uuid
from typing import Iterable, Optional

from core.domain.exceptions import DomainException, MissingFileError
from core.domain.value_objects import ImageType
from core.metrics import (
    image_file_removal_failures_total,
    images_deleted_total,
    images_saved_total,
)
from images.application.commands.save_image import SaveImageCommand
from images.domain.image import Image
from images.ports.file_storage import FileStorage
from images.ports.image_repository import ImageRepository

logger = logging.getLogger(__name__)


class ImageLifecycleService:
    """Application service for saving and deleting images."""

    def __init__(self, image_repository: ImageRepository, file_storage: FileStorage):
        """Initialize service with its persistence handles."""
        self.image_repository = image_repository
        self.file_storage = file_storage

    async def save_single_image(self, command: SaveImageCommand) -> Image:
        """
        Store one uploaded file and create its Image row.

        Args:
            command: SaveImageCommand

        Returns:
            Saved Image entity

        Raises:
            MissingFileError: If the command carries no bytes
        """
        if not command.content:
            raise MissingFileError()

        stored = await self.file_storage.write_uploaded_file(
            content=command.content,
            original_file_name=command.original_file_name,
            folder=command.folder,
            image_type=command.type,
        )

        image = Image.create(
            image_type=command.type,
            url=stored.url,
            parent_id=command.parent_id,
        )
        saved = await self.image_repository.save(image)

        images_saved_total.labels(image_type=str(command.type)).inc()
        logger.info(
            "Image saved",
            extra={
                "image_id": str(saved.id),
                "image_type": str(saved.type),
                "parent_id": str(saved.parent_id),
                "url": saved.url,
            },
        )
        return saved

    async def _remove_file(self, image: Image) -> None:
        """Remove an image's file, logging instead of raising on failure."""
        try:
            path = self.file_storage.resolve_absolute_path_from_url(image.url)
            await self.file_storage.delete_file(path)
        except DomainException as e:
            image_file_removal_failures_total.inc()
            logger.warning(
                "Could not remove image file",
                extra={"image_id": str(image.id), "url": image.url, "error": e.message},
            )

    async def delete_images_by_ids(self, image_ids: Iterable[uuid.UUID]) -> None:
        """
        Delete several images: files concurrently, then rows in one batch.

        Unknown ids are ignored. An empty input issues no repository calls.

        Args:
            image_ids: Image UUIDs
        """
        ids = list(dict.fromkeys(image_ids))
        if not ids:
            return

        images = await self.image_repository.find_by_ids(ids)
        if not images:
            return

        await asyncio.gather(*(self._remove_file(image) for image in images))

        existing_ids = [image.id for image in images]
        deleted = await self.image_repository.delete_many(existing_ids)
        for image in images:
            images_deleted_total.labels(image_type=str(image.type)).inc()

        logger.info(
            "Images deleted",
            extra={"requested": len(ids), "deleted": deleted},
        )

    async def delete_images_by_parent(
        self, parent_id: uuid.UUID, image_type: Optional[ImageType] = None
    ) -> None:
        """
        Delete every image uploaded for an aggregate, one at a time.

        Args:
            parent_id: Owning aggregate UUID
            image_type: Optional image type filter
        """
        images = await self.image_repository.find_by_parent(parent_id, image_type)

        for image in images:
            await self._remove_file(image)
            await self.image_repository.delete(image.id)
            images_deleted_total.labels(image_type=str(image.type)).inc()

        if images:
            logger.info(
                "Images deleted for parent",
                extra={"parent_id": str(parent_id), "deleted": len(images)},
            )

    async def delete_image_by_id(self, image_id: uuid.UUID) -> None:
        """
        Delete one image; an unknown id is silently ignored.

        Args:
            image_id: Image UUID
        """
        image = await self.image_repository.find_by_id(image_id)
        if image is None:
            return

        await self._remove_file(image)
        await self.image_repository.delete(image.id)
        images_deleted_total.labels(image_type=str(image.type)).inc()
        logger.info("Image deleted", extra={"image_id": str(image.id), "url": image.url})
