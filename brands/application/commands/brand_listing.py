"""
Commands that change how brands are listed.
"""

import uuid
from dataclasses import dataclass
from typing import List


@dataclass
class ToggleBrandVisibilityCommand:
    """Command to publish or hide a brand."""

    brand_id: uuid.UUID
    is_visible: bool


@dataclass
class SortOrderEntry:
    """New position of one brand."""

    id: uuid.UUID
    sort_order: int


@dataclass
class SortBrandsCommand:
    """Command to reorder brands in a single batch."""

    entries: List[SortOrderEntry]
