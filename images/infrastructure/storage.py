"""
Local disk implementation of the FileStorage port.

Files live under ``<UPLOAD_ROOT>/<folder>/<type>-<uuid><ext>`` and are
published as ``<UPLOAD_URL><folder>/<type>-<uuid><ext>``. Stored image rows
keep that URL, so ``build_url`` and ``resolve_absolute_path_from_url`` must
stay exact inverses of each other.
"""

import logging
import re
import uuid
from pathlib import Path, PurePosixPath
from typing import Optional, Union

import aiofiles
import aiofiles.os
from django.conf import settings

from core.domain.exceptions import FileRemovalError, InvalidUploadPathError, MissingFileError
from core.domain.value_objects import ImageType
from images.ports.file_storage import FileStorage, StoredFile

logger = logging.getLogger(__name__)

_SAFE_EXTENSION = re.compile(r"^\.[A-Za-z0-9]{1,16}$")


class UploadPathResolver:
    """Maps logical folders and stored URLs onto the upload root."""

    def __init__(self, upload_root: Union[str, Path], url_prefix: str = "/uploads/"):
        self.upload_root = Path(upload_root).resolve()
        self.url_prefix = "/" + url_prefix.strip("/") + "/"

    def _ensure_inside_root(self, path: Path) -> Path:
        resolved = path.resolve()
        if resolved != self.upload_root and not resolved.is_relative_to(self.upload_root):
            raise InvalidUploadPathError(f"Path escapes the upload root: {path}")
        return resolved

    @staticmethod
    def _validate_relative(value: str) -> PurePosixPath:
        if not value or "\\" in value or "\x00" in value:
            raise InvalidUploadPathError(f"Invalid upload path: {value!r}")
        relative = PurePosixPath(value)
        if relative.is_absolute() or ".." in relative.parts:
            raise InvalidUploadPathError(f"Invalid upload path: {value!r}")
        return relative

    def resolve_upload_folder(self, folder: str) -> Path:
        """
        Resolve the directory for a logical folder name.

        Args:
            folder: Folder name such as "brands"

        Returns:
            Absolute directory path inside the upload root

        Raises:
            InvalidUploadPathError: On empty, absolute or traversing names
        """
        relative = self._validate_relative(folder)
        return self._ensure_inside_root(self.upload_root.joinpath(*relative.parts))

    def build_url(self, folder: str, file_name: str) -> str:
        """Public URL of a file stored under ``folder``."""
        relative = self._validate_relative(folder)
        return f"{self.url_prefix}{relative.as_posix()}/{file_name}"

    def resolve_absolute_path_from_url(self, url: str) -> Path:
        """
        Resolve a stored public URL back to its file on disk.

        Args:
            url: URL of form ``/uploads/<folder>/<file>``

        Returns:
            Absolute file path inside the upload root

        Raises:
            InvalidUploadPathError: If the URL is not under the upload prefix
                or escapes the upload root
        """
        prefix = self.url_prefix.lstrip("/")
        clean = url[1:] if url.startswith("/") else url
        if not clean.startswith(prefix) or len(clean) == len(prefix):
            raise InvalidUploadPathError(f"Not an upload URL: {url!r}")
        relative = self._validate_relative(clean[len(prefix):])
        return self._ensure_inside_root(self.upload_root.joinpath(*relative.parts))


def build_unique_file_name(image_type: ImageType, original_file_name: str) -> str:
    """
    Build ``<type>-<uuid4><ext>`` for an upload.

    Uniqueness relies on the random UUID; no existence check is made.
    """
    extension = Path(original_file_name or "").suffix
    if extension and not _SAFE_EXTENSION.match(extension):
        logger.debug(
            "Discarding unsafe file extension",
            extra={"original_file_name": original_file_name, "extension": extension},
        )
        extension = ""
    return f"{str(image_type).lower()}-{uuid.uuid4()}{extension}"


class LocalFileStorage(FileStorage):
    """FileStorage that writes uploads to the local filesystem."""

    def __init__(self, resolver: Optional[UploadPathResolver] = None):
        self.resolver = resolver or UploadPathResolver(
            settings.UPLOAD_ROOT, getattr(settings, "UPLOAD_URL", "/uploads/")
        )

    async def write_uploaded_file(
        self,
        content: Optional[bytes],
        original_file_name: str,
        folder: str,
        image_type: ImageType,
    ) -> StoredFile:
        """Write bytes to ``<root>/<folder>/<generated name>``."""
        if not content:
            raise MissingFileError()

        upload_folder = self.resolver.resolve_upload_folder(folder)
        await aiofiles.os.makedirs(upload_folder, exist_ok=True)

        file_name = build_unique_file_name(image_type, original_file_name)
        file_path = upload_folder / file_name

        async with aiofiles.open(file_path, "wb") as f:
            await f.write(content)

        url = self.resolver.build_url(folder, file_name)
        logger.debug(
            "Stored uploaded file",
            extra={"url": url, "size": len(content), "original_file_name": original_file_name},
        )
        return StoredFile(url=url, file_name=file_name)

    async def delete_file(self, absolute_path: Path) -> bool:
        """Remove a file; a file that is already gone counts as removed."""
        try:
            await aiofiles.os.remove(absolute_path)
        except FileNotFoundError:
            logger.info("File already absent", extra={"path": str(absolute_path)})
            return False
        except OSError as e:
            raise FileRemovalError(f"Failed to remove {absolute_path}: {e}") from e
        return True

    def resolve_absolute_path_from_url(self, url: str) -> Path:
        """Map a stored URL to its path on disk."""
        return self.resolver.resolve_absolute_path_from_url(url)
