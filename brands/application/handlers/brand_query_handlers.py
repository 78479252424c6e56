"""
Brand query handlers.
"""

from typing import List

from brands.application.dto.brand_dto import BrandDTO
from brands.application.handlers.common import get_brand_or_raise, to_brand_dto
from brands.application.queries.brand_queries import (
    GetBrandBySlugQuery,
    GetBrandQuery,
    ListBrandsQuery,
)
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import BrandNotFoundError
from images.ports.image_repository import ImageRepository


class ListBrandsHandler:
    """Handler for ListBrandsQuery."""

    def __init__(self, brand_repository: BrandRepository, image_repository: ImageRepository):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.image_repository = image_repository

    async def handle(self, query: ListBrandsQuery) -> List[BrandDTO]:
        """
        List brands in sort order with their images.

        Args:
            query: ListBrandsQuery

        Returns:
            List of BrandDTO (may be empty)
        """
        brands = await self.brand_repository.list_all(published_only=query.published_only)

        image_ids = [brand.image_id for brand in brands if brand.image_id]
        images = await self.image_repository.find_by_ids(image_ids)
        images_by_id = {image.id: image for image in images}

        return [BrandDTO.from_entity(brand, images_by_id.get(brand.image_id)) for brand in brands]


class GetBrandHandler:
    """Handler for GetBrandQuery."""

    def __init__(self, brand_repository: BrandRepository, image_repository: ImageRepository):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.image_repository = image_repository

    async def handle(self, query: GetBrandQuery) -> BrandDTO:
        """
        Get one brand by ID.

        Raises:
            BrandNotFoundError: If brand not found
        """
        brand = await get_brand_or_raise(self.brand_repository, query.brand_id)
        return await to_brand_dto(brand, self.image_repository)


class GetBrandBySlugHandler:
    """Handler for GetBrandBySlugQuery."""

    def __init__(self, brand_repository: BrandRepository, image_repository: ImageRepository):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.image_repository = image_repository

    async def handle(self, query: GetBrandBySlugQuery) -> BrandDTO:
        """
        Get one brand by slug.

        Raises:
            BrandNotFoundError: If brand not found
        """
        brand = await self.brand_repository.find_by_slug(query.slug)
        if not brand:
            raise BrandNotFoundError(f"Brand '{query.slug}' not found")
        return await to_brand_dto(brand, self.image_repository)
