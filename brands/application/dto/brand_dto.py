"""
Brand DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from brands.domain.brand import Brand
from images.domain.image import Image


@dataclass
class ImageDTO:
    """DTO for image information."""

    id: uuid.UUID
    type: str
    url: str
    parent_id: uuid.UUID

    @classmethod
    def from_entity(cls, image: Image) -> "ImageDTO":
        return cls(id=image.id, type=image.type.value, url=image.url, parent_id=image.parent_id)


@dataclass
class BrandDTO:
    """DTO for brand information with its image relation populated."""

    id: uuid.UUID
    title: str
    slug: str
    description: Optional[str]
    short_title: Optional[str]
    short_description: Optional[str]
    type: Optional[str]
    country_code: Optional[str]
    sort_order: int
    published: bool
    image_id: Optional[uuid.UUID]
    image: Optional[ImageDTO]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, brand: Brand, image: Optional[Image] = None) -> "BrandDTO":
        return cls(
            id=brand.id,
            title=brand.title,
            slug=str(brand.slug),
            description=brand.description,
            short_title=brand.short_title,
            short_description=brand.short_description,
            type=brand.type.value if brand.type else None,
            country_code=brand.country_code,
            sort_order=brand.sort_order,
            published=brand.published,
            image_id=brand.image_id,
            image=ImageDTO.from_entity(image) if image else None,
            created_at=brand.created_at,
            updated_at=brand.updated_at,
        )


@dataclass
class SortResultDTO:
    """DTO for sort order response."""

    status: str
    message: str
    updated: int
