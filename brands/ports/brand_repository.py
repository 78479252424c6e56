"""
Brand repository port (interface).

This defines the contract for brand persistence operations.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from brands.domain.brand import Brand


class BrandRepository(ABC):
    """
    Abstract repository for Brand entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity (insert or update).

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand UUID

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Brand]:
        """
        Find a brand by slug.

        Args:
            slug: Brand slug

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_title(self, title: str) -> Optional[Brand]:
        """
        Find a brand by its exact title.

        Args:
            title: Brand title

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    async def exists(self, brand_id: uuid.UUID) -> bool:
        """
        Check if a brand exists.

        Args:
            brand_id: Brand UUID

        Returns:
            True if brand exists, False otherwise
        """
        pass

    @abstractmethod
    async def list_all(self, published_only: bool = False) -> List[Brand]:
        """
        List brands ordered by sort order.

        Args:
            published_only: Only return published brands

        Returns:
            List of Brand entities
        """
        pass

    @abstractmethod
    async def delete(self, brand_id: uuid.UUID) -> None:
        """
        Delete a brand row.

        Args:
            brand_id: Brand UUID
        """
        pass

    @abstractmethod
    async def update_sort_orders(self, entries: Sequence[Tuple[uuid.UUID, int]]) -> int:
        """
        Apply sort orders as one all-or-nothing batch.

        Args:
            entries: (brand id, sort order) pairs

        Returns:
            Number of brands updated

        Raises:
            BrandNotFoundError: If any id does not resolve; nothing is applied
        """
        pass
