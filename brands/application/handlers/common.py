"""
Helpers shared by brand handlers.
"""

import uuid

from brands.application.dto.brand_dto import BrandDTO
from brands.domain.brand import Brand
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import BrandNotFoundError
from images.ports.image_repository import ImageRepository


async def get_brand_or_raise(brand_repository: BrandRepository, brand_id: uuid.UUID) -> Brand:
    """
    Load a brand or fail.

    Raises:
        BrandNotFoundError: If the brand does not exist
    """
    brand = await brand_repository.find_by_id(brand_id)
    if not brand:
        raise BrandNotFoundError(f"Brand {brand_id} not found")
    return brand


async def to_brand_dto(brand: Brand, image_repository: ImageRepository) -> BrandDTO:
    """Build a BrandDTO with the image relation populated."""
    image = None
    if brand.image_id:
        image = await image_repository.find_by_id(brand.image_id)
    return BrandDTO.from_entity(brand, image)
