"""
File storage port (interface).

Defines how uploaded image bytes are persisted and removed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from core.domain.value_objects import ImageType


@dataclass(frozen=True)
class StoredFile:
    """Result of writing an uploaded file."""

    url: str
    file_name: str


class FileStorage(ABC):
    """Abstract storage for uploaded files."""

    @abstractmethod
    async def write_uploaded_file(
        self,
        content: Optional[bytes],
        original_file_name: str,
        folder: str,
        image_type: ImageType,
    ) -> StoredFile:
        """
        Write an uploaded byte buffer under a folder.

        Args:
            content: File bytes
            original_file_name: Client-side file name (extension is kept)
            folder: Logical folder, e.g. "brands"
            image_type: Image type used as filename prefix

        Returns:
            StoredFile with public URL and generated name

        Raises:
            MissingFileError: If no file payload was supplied
        """
        pass

    @abstractmethod
    async def delete_file(self, absolute_path: Path) -> bool:
        """
        Remove a stored file.

        Args:
            absolute_path: Path of the file on disk

        Returns:
            True if removed, False if it was already absent

        Raises:
            FileRemovalError: If the file exists but cannot be removed
        """
        pass

    @abstractmethod
    def resolve_absolute_path_from_url(self, url: str) -> Path:
        """
        Map a stored public URL back to the file on disk.

        Args:
            url: Public URL as recorded on the image row

        Returns:
            Absolute filesystem path
        """
        pass
