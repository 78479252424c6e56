"""
Brand queries.
"""

import uuid
from dataclasses import dataclass


@dataclass
class ListBrandsQuery:
    """Query to list brands in sort order."""

    published_only: bool = False


@dataclass
class GetBrandQuery:
    """Query to get a brand by ID."""

    brand_id: uuid.UUID


@dataclass
class GetBrandBySlugQuery:
    """Query to get a brand by slug."""

    slug: str
