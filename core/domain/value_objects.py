"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum

from django.utils.text import slugify
from unidecode import unidecode

from core.domain.exceptions import InvalidInputError


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


def generate_slug(title: str) -> str:
    """
    Derive a URL-safe slug from a display title.

    The title is transliterated to ASCII first so that non-Latin
    titles ("Диор") still produce a readable Latin slug ("dior").

    Args:
        title: Brand title

    Returns:
        Lowercase slug made of [a-z0-9-]

    Raises:
        InvalidInputError: If nothing sluggable remains
    """
    latin = unidecode(title or "")
    slug = slugify(latin).replace("_", "-").strip("-")
    while "--" in slug:
        slug = slug.replace("--", "-")
    if not slug:
        raise InvalidInputError(f"Cannot derive a slug from title: {title!r}")
    return slug


@dataclass(frozen=True)
class BrandSlug(ValueObject):
    """Brand slug value object."""

    value: str

    def __post_init__(self):
        """Validate slug format."""
        if not self.value:
            raise ValueError("Brand slug cannot be empty")
        if not self.value.replace("-", "").isalnum() or not self.value.isascii():
            raise ValueError(f"Invalid brand slug format: {self.value}")
        if self.value != self.value.lower():
            raise ValueError(f"Invalid brand slug format: {self.value}")

    @classmethod
    def from_title(cls, title: str) -> "BrandSlug":
        """Build the slug for a brand title."""
        return cls(generate_slug(title))

    def __str__(self) -> str:
        """Return slug as string."""
        return self.value


class ImageType(Enum):
    """Kind of aggregate that owns an image."""

    BRAND = "BRAND"
    PRODUCT = "PRODUCT"

    def __str__(self) -> str:
        """Return image type as string."""
        return self.value


class BrandType(Enum):
    """Market segment of a brand."""

    DESIGNER = "DESIGNER"
    NICHE = "NICHE"
    MASS_MARKET = "MASS_MARKET"
    INDIE = "INDIE"

    def __str__(self) -> str:
        """Return brand type as string."""
        return self.value
