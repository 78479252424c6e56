"""
Image domain entity.

An Image is one stored file plus the catalog linkage that says
which aggregate it was uploaded for.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.value_objects import ImageType


@dataclass(frozen=True)
class Image:
    """
    Image domain entity.

    Images are never updated in place: replacing an image means
    deleting the old one and creating a new one.
    """

    id: uuid.UUID
    type: ImageType
    url: str
    parent_id: uuid.UUID
    created_at: datetime

    def __post_init__(self):
        """Validate image entity."""
        if not self.url or not self.url.startswith("/"):
            raise ValueError(f"Image url must be an absolute public path: {self.url!r}")
        if not isinstance(self.type, ImageType):
            raise ValueError(f"Invalid image type: {self.type!r}")

    @classmethod
    def create(
        cls,
        image_type: ImageType,
        url: str,
        parent_id: uuid.UUID,
        image_id: Optional[uuid.UUID] = None,
    ) -> "Image":
        """
        Create a new Image entity.

        Args:
            image_type: Kind of aggregate owning the image
            url: Public URL of the stored file
            parent_id: Owning aggregate id
            image_id: Optional UUID (generated if not provided)

        Returns:
            Image entity instance
        """
        return cls(
            id=image_id or uuid.uuid4(),
            type=image_type,
            url=url,
            parent_id=parent_id,
            created_at=datetime.utcnow(),
        )
