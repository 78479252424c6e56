"""
Unit tests for upload path resolution and local file storage.
"""

import logging
import re

import pytest

from core.domain.exceptions import InvalidUploadPathError, MissingFileError
from core.domain.value_objects import ImageType
from images.infrastructure.storage import build_unique_file_name

UUID_RE = "[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


class TestUploadPathResolver:
    """Tests for UploadPathResolver."""

    def test_resolve_upload_folder(self, path_resolver, upload_root):
        """Test folder resolves under the upload root."""
        folder = path_resolver.resolve_upload_folder("brands")
        assert folder == upload_root.resolve() / "brands"

    def test_nested_folder(self, path_resolver, upload_root):
        """Test nested folder names are allowed."""
        folder = path_resolver.resolve_upload_folder("brands/logos")
        assert folder == upload_root.resolve() / "brands" / "logos"

    @pytest.mark.parametrize(
        "folder",
        ["", "..", "../etc", "brands/../../etc", "/etc", "brands\\..\\x", "bra\x00nds"],
    )
    def test_rejects_unsafe_folder(self, path_resolver, folder):
        """Test traversal and absolute folder names are rejected."""
        with pytest.raises(InvalidUploadPathError):
            path_resolver.resolve_upload_folder(folder)

    def test_build_url(self, path_resolver):
        """Test public URL shape."""
        assert path_resolver.build_url("brands", "a.png") == "/uploads/brands/a.png"

    def test_url_and_path_are_inverse(self, path_resolver, upload_root):
        """Test a built URL resolves back to the file it names."""
        url = path_resolver.build_url("brands", "brand-x.png")
        path = path_resolver.resolve_absolute_path_from_url(url)

        assert path == upload_root.resolve() / "brands" / "brand-x.png"

    def test_url_without_leading_slash(self, path_resolver, upload_root):
        """Test URLs stored without the leading slash still resolve."""
        path = path_resolver.resolve_absolute_path_from_url("uploads/brands/a.png")
        assert path == upload_root.resolve() / "brands" / "a.png"

    @pytest.mark.parametrize(
        "url",
        ["/static/a.png", "/uploads/", "/uploads/../secret.txt", "/uploads/brands/../../x"],
    )
    def test_rejects_foreign_urls(self, path_resolver, url):
        """Test URLs outside the upload prefix or root are rejected."""
        with pytest.raises(InvalidUploadPathError):
            path_resolver.resolve_absolute_path_from_url(url)


class TestBuildUniqueFileName:
    """Tests for generated file names."""

    def test_name_shape(self):
        """Test <type>-<uuid><ext> naming."""
        name = build_unique_file_name(ImageType.BRAND, "logo.png")
        assert re.fullmatch(rf"brand-{UUID_RE}\.png", name)

    def test_names_are_unique(self):
        """Test two uploads of the same name never collide."""
        first = build_unique_file_name(ImageType.BRAND, "logo.png")
        second = build_unique_file_name(ImageType.BRAND, "logo.png")
        assert first != second

    def test_missing_extension(self):
        """Test files without an extension get none."""
        name = build_unique_file_name(ImageType.PRODUCT, "logo")
        assert re.fullmatch(rf"product-{UUID_RE}", name)

    def test_unsafe_extension_is_dropped(self):
        """Test odd extensions are not carried into the stored name."""
        name = build_unique_file_name(ImageType.BRAND, "logo.p/ng")
        assert re.fullmatch(rf"brand-{UUID_RE}", name)

    def test_unsafe_extension_is_logged(self, caplog):
        """Test a discarded extension leaves a debug record."""
        caplog.set_level(logging.DEBUG, logger="images.infrastructure.storage")

        name = build_unique_file_name(ImageType.BRAND, "logo.jpeg~")

        assert re.fullmatch(rf"brand-{UUID_RE}", name)
        assert "Discarding unsafe file extension" in caplog.text

    def test_missing_extension_is_not_logged(self, caplog):
        """Test names without any extension are not reported."""
        caplog.set_level(logging.DEBUG, logger="images.infrastructure.storage")

        build_unique_file_name(ImageType.BRAND, "logo")

        assert "Discarding" not in caplog.text


class TestLocalFileStorage:
    """Tests for LocalFileStorage."""

    @pytest.mark.asyncio
    async def test_write_uploaded_file(self, file_storage, upload_root, png_bytes):
        """Test bytes land in the folder and the URL points at them."""
        stored = await file_storage.write_uploaded_file(
            content=png_bytes,
            original_file_name="logo.png",
            folder="brands",
            image_type=ImageType.BRAND,
        )

        assert re.fullmatch(rf"/uploads/brands/brand-{UUID_RE}\.png", stored.url)
        path = upload_root / "brands" / stored.file_name
        assert path.read_bytes() == png_bytes
        assert file_storage.resolve_absolute_path_from_url(stored.url) == path.resolve()

    @pytest.mark.asyncio
    async def test_write_creates_missing_folder(self, file_storage, upload_root, png_bytes):
        """Test the target folder is created on demand."""
        assert not upload_root.exists()

        await file_storage.write_uploaded_file(png_bytes, "a.png", "brands", ImageType.BRAND)

        assert (upload_root / "brands").is_dir()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, b""])
    async def test_write_without_content(self, file_storage, upload_root, content):
        """Test missing content is rejected before touching disk."""
        with pytest.raises(MissingFileError):
            await file_storage.write_uploaded_file(content, "a.png", "brands", ImageType.BRAND)

        assert not upload_root.exists()

    @pytest.mark.asyncio
    async def test_delete_file(self, file_storage, upload_root, png_bytes):
        """Test deleting a stored file."""
        stored = await file_storage.write_uploaded_file(
            png_bytes, "a.png", "brands", ImageType.BRAND
        )
        path = file_storage.resolve_absolute_path_from_url(stored.url)

        assert await file_storage.delete_file(path) is True
        assert not path.exists()

    @pytest.mark.asyncio
    async def test_delete_missing_file(self, file_storage, upload_root):
        """Test deleting an absent file is not an error."""
        path = upload_root / "brands" / "gone.png"
        assert await file_storage.delete_file(path) is False
