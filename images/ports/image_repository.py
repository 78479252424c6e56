"""
Image repository port (interface).

This defines the contract for image metadata persistence.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from core.domain.value_objects import ImageType
from images.domain.image import Image


class ImageRepository(ABC):
    """Abstract repository for Image metadata rows."""

    @abstractmethod
    async def save(self, image: Image) -> Image:
        """
        Insert an image row.

        Args:
            image: Image entity to save

        Returns:
            Saved image entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, image_id: uuid.UUID) -> Optional[Image]:
        """
        Find an image by ID.

        Args:
            image_id: Image UUID

        Returns:
            Image entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_ids(self, image_ids: Iterable[uuid.UUID]) -> List[Image]:
        """
        Find every existing image among the given IDs.

        Args:
            image_ids: Image UUIDs; unknown ids are ignored

        Returns:
            List of Image entities that exist
        """
        pass

    @abstractmethod
    async def find_by_parent(
        self, parent_id: uuid.UUID, image_type: Optional[ImageType] = None
    ) -> List[Image]:
        """
        Find images uploaded for an aggregate.

        Args:
            parent_id: Owning aggregate UUID
            image_type: Optional image type filter

        Returns:
            List of Image entities
        """
        pass

    @abstractmethod
    async def delete(self, image_id: uuid.UUID) -> None:
        """
        Delete one image row.

        Args:
            image_id: Image UUID
        """
        pass

    @abstractmethod
    async def delete_many(self, image_ids: Iterable[uuid.UUID]) -> int:
        """
        Delete image rows in a single batch.

        Args:
            image_ids: Image UUIDs

        Returns:
            Number of rows deleted
        """
        pass
