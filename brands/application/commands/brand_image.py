"""
Brand image commands.
"""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class AttachBrandImageCommand:
    """Command to attach (or replace) a brand's image."""

    brand_id: uuid.UUID
    content: Optional[bytes]
    original_file_name: str


@dataclass
class DetachBrandImageCommand:
    """Command to remove a brand's image."""

    brand_id: uuid.UUID
