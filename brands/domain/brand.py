"""
Brand domain entity.

This is the aggregate that owns at most one image.
It contains business logic and is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from core.domain.value_objects import BrandSlug, BrandType


@dataclass(frozen=True)
class Brand:
    """
    Brand domain entity.

    Represents a catalog brand. ``image_id`` is the single source of
    truth for the brand's image relation.
    This is an immutable value object with business logic.
    """

    id: uuid.UUID
    title: str
    slug: BrandSlug
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    short_title: Optional[str] = None
    short_description: Optional[str] = None
    type: Optional[BrandType] = None
    country_code: Optional[str] = None
    sort_order: int = 0
    published: bool = False
    image_id: Optional[uuid.UUID] = None

    def __post_init__(self):
        """Validate brand entity."""
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Brand title cannot be empty")
        if len(self.title) > 255:
            raise ValueError("Brand title too long")
        if self.country_code is not None:
            if len(self.country_code) > 2 or not self.country_code.isalpha():
                raise ValueError("Country code must be at most 2 letters")

    @classmethod
    def create(
        cls,
        title: str,
        brand_id: Optional[uuid.UUID] = None,
        description: Optional[str] = None,
        short_title: Optional[str] = None,
        short_description: Optional[str] = None,
        type: Optional[BrandType] = None,  # pylint: disable=redefined-builtin
        country_code: Optional[str] = None,
        sort_order: int = 0,
        published: bool = False,
    ) -> "Brand":
        """
        Create a new Brand entity.

        The slug is derived from the title.

        Args:
            title: Brand display title
            brand_id: Optional UUID (generated if not provided)
            description: Full description
            short_title: Compact display title
            short_description: Short marketing blurb
            type: Brand market segment
            country_code: ISO 3166-1 alpha-2 code
            sort_order: Position in listings
            published: Visibility flag

        Returns:
            Brand entity instance
        """
        now = datetime.utcnow()
        return cls(
            id=brand_id or uuid.uuid4(),
            title=title.strip(),
            slug=BrandSlug.from_title(title),
            description=description,
            short_title=short_title,
            short_description=short_description,
            type=type,
            country_code=country_code.upper() if country_code else None,
            sort_order=sort_order,
            published=published,
            created_at=now,
            updated_at=now,
        )

    def update_details(self, **changes) -> "Brand":
        """
        Create a new Brand instance with updated fields.

        A changed title also re-derives the slug.

        Args:
            **changes: Brand fields to change

        Returns:
            New Brand instance
        """
        if "title" in changes:
            changes["title"] = changes["title"].strip()
            changes["slug"] = BrandSlug.from_title(changes["title"])
        if changes.get("country_code"):
            changes["country_code"] = changes["country_code"].upper()
        return replace(self, updated_at=datetime.utcnow(), **changes)

    def attach_image(self, image_id: uuid.UUID) -> "Brand":
        """Create a new Brand instance pointing at ``image_id``."""
        return replace(self, image_id=image_id, updated_at=datetime.utcnow())

    def detach_image(self) -> "Brand":
        """Create a new Brand instance with no image."""
        return replace(self, image_id=None, updated_at=datetime.utcnow())

    def set_visibility(self, is_visible: bool) -> "Brand":
        """Create a new Brand instance with ``published`` set."""
        return replace(self, published=is_visible, updated_at=datetime.utcnow())

    @property
    def has_image(self) -> bool:
        """Whether an image is currently attached."""
        return self.image_id is not None
