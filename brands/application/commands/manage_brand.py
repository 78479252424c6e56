"""
Brand management commands.

Commands to create, update and delete brands.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from core.domain.value_objects import BrandType


@dataclass
class CreateBrandCommand:
    """Command to create a brand. The slug is derived from ``title``."""

    title: str
    description: Optional[str] = None
    short_title: Optional[str] = None
    short_description: Optional[str] = None
    type: Optional[BrandType] = None
    country_code: Optional[str] = None
    sort_order: int = 0
    published: bool = False


@dataclass
class UpdateBrandCommand:
    """
    Command to update a brand.

    ``changes`` only holds the fields the caller sent.
    """

    brand_id: uuid.UUID
    changes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class DeleteBrandCommand:
    """Command to delete a brand and its images."""

    brand_id: uuid.UUID
