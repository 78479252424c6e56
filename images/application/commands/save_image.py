"""
SaveImageCommand.

Command to store one uploaded image for an aggregate.
"""

import uuid
from dataclasses import dataclass
from typing import Optional

from core.domain.value_objects import ImageType


@dataclass
class SaveImageCommand:
    """Command to write an uploaded file and record it as an Image."""

    content: Optional[bytes]
    original_file_name: str
    folder: str  # "brands", "products", ...
    type: ImageType
    parent_id: uuid.UUID
