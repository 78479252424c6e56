"""
Unit tests for ImageLifecycleService.
"""

import uuid

import pytest

from core.domain.exceptions import FileRemovalError, MissingFileError
from core.domain.value_objects import ImageType
from images.application.commands.save_image import SaveImageCommand
from images.application.services.image_lifecycle_service import ImageLifecycleService
from images.domain.image import Image


def _command(content, parent_id=None, folder="brands"):
    return SaveImageCommand(
        content=content,
        original_file_name="logo.png",
        folder=folder,
        type=ImageType.BRAND,
        parent_id=parent_id or uuid.uuid4(),
    )


class TestSaveSingleImage:
    """Tests for save_single_image."""

    @pytest.mark.asyncio
    async def test_save_image(self, image_service, memory_image_repository, png_bytes):
        """Test the file is written and a row is created."""
        parent_id = uuid.uuid4()

        image = await image_service.save_single_image(_command(png_bytes, parent_id))

        assert image.type == ImageType.BRAND
        assert image.parent_id == parent_id
        assert image.url.startswith("/uploads/brands/brand-")
        assert memory_image_repository.images[image.id] == image
        path = image_service.file_storage.resolve_absolute_path_from_url(image.url)
        assert path.read_bytes() == png_bytes

    @pytest.mark.asyncio
    async def test_save_without_content(
        self, image_service, memory_image_repository, upload_root
    ):
        """Test nothing is written or inserted without bytes."""
        with pytest.raises(MissingFileError):
            await image_service.save_single_image(_command(None))

        assert memory_image_repository.calls == []
        assert not upload_root.exists()


class TestDeleteImagesByIds:
    """Tests for delete_images_by_ids."""

    @pytest.mark.asyncio
    async def test_empty_input_is_noop(self, image_service, memory_image_repository):
        """Test an empty id list touches nothing."""
        await image_service.delete_images_by_ids([])

        assert memory_image_repository.calls == []

    @pytest.mark.asyncio
    async def test_deletes_existing_and_ignores_missing(
        self, image_service, memory_image_repository, png_bytes
    ):
        """Test known ids are removed with their files and unknown ids ignored."""
        first = await image_service.save_single_image(_command(png_bytes))
        second = await image_service.save_single_image(_command(png_bytes))
        kept = await image_service.save_single_image(_command(png_bytes))
        first_path = image_service.file_storage.resolve_absolute_path_from_url(first.url)
        second_path = image_service.file_storage.resolve_absolute_path_from_url(second.url)

        await image_service.delete_images_by_ids([first.id, uuid.uuid4(), second.id, first.id])

        assert set(memory_image_repository.images) == {kept.id}
        assert not first_path.exists()
        assert not second_path.exists()
        assert memory_image_repository.calls.count("delete_many") == 1

    @pytest.mark.asyncio
    async def test_only_unknown_ids(self, image_service, memory_image_repository):
        """Test unknown ids alone issue no delete."""
        await image_service.delete_images_by_ids([uuid.uuid4()])

        assert memory_image_repository.calls == ["find_by_ids"]

    @pytest.mark.asyncio
    async def test_row_removed_when_file_already_gone(
        self, image_service, memory_image_repository, png_bytes
    ):
        """Test a missing file does not keep the row alive."""
        image = await image_service.save_single_image(_command(png_bytes))
        image_service.file_storage.resolve_absolute_path_from_url(image.url).unlink()

        await image_service.delete_images_by_ids([image.id])

        assert image.id not in memory_image_repository.images

    @pytest.mark.asyncio
    async def test_unresolvable_url_is_logged_not_raised(
        self, image_service, memory_image_repository
    ):
        """Test a row whose URL is outside the upload root is still deleted."""
        image = Image.create(ImageType.BRAND, "/elsewhere/x.png", uuid.uuid4())
        memory_image_repository.images[image.id] = image

        await image_service.delete_images_by_ids([image.id])

        assert image.id not in memory_image_repository.images


class TestDeleteImagesByParent:
    """Tests for delete_images_by_parent."""

    @pytest.mark.asyncio
    async def test_deletes_all_for_parent(
        self, image_service, memory_image_repository, png_bytes
    ):
        """Test only the parent's images are removed."""
        parent_id = uuid.uuid4()
        owned = [
            await image_service.save_single_image(_command(png_bytes, parent_id))
            for _ in range(2)
        ]
        other = await image_service.save_single_image(_command(png_bytes))

        await image_service.delete_images_by_parent(parent_id)

        assert set(memory_image_repository.images) == {other.id}
        for image in owned:
            path = image_service.file_storage.resolve_absolute_path_from_url(image.url)
            assert not path.exists()

    @pytest.mark.asyncio
    async def test_type_filter(self, image_service, memory_image_repository, png_bytes):
        """Test the image type filter is honoured."""
        parent_id = uuid.uuid4()
        brand_image = await image_service.save_single_image(_command(png_bytes, parent_id))
        product_image = Image.create(ImageType.PRODUCT, "/uploads/products/p.png", parent_id)
        memory_image_repository.images[product_image.id] = product_image

        await image_service.delete_images_by_parent(parent_id, ImageType.BRAND)

        assert brand_image.id not in memory_image_repository.images
        assert product_image.id in memory_image_repository.images

    @pytest.mark.asyncio
    async def test_no_images(self, image_service, memory_image_repository):
        """Test a parent with no images is a no-op."""
        await image_service.delete_images_by_parent(uuid.uuid4())

        assert memory_image_repository.calls == ["find_by_parent"]


class TestDeleteImageById:
    """Tests for delete_image_by_id."""

    @pytest.mark.asyncio
    async def test_delete(self, image_service, memory_image_repository, png_bytes):
        """Test one image is removed with its file."""
        image = await image_service.save_single_image(_command(png_bytes))
        path = image_service.file_storage.resolve_absolute_path_from_url(image.url)

        await image_service.delete_image_by_id(image.id)

        assert image.id not in memory_image_repository.images
        assert not path.exists()
        assert image_service.file_storage.deleted_paths == [path]

    @pytest.mark.asyncio
    async def test_unknown_id(self, image_service, memory_image_repository):
        """Test an unknown id is silently ignored."""
        await image_service.delete_image_by_id(uuid.uuid4())

        assert memory_image_repository.calls == ["find_by_id"]
        assert image_service.file_storage.deleted_paths == []


class FailingFileStorage:
    """FileStorage whose removals always fail with an OS error."""

    def __init__(self, inner):
        self.inner = inner

    async def write_uploaded_file(self, *args, **kwargs):
        return await self.inner.write_uploaded_file(*args, **kwargs)

    async def delete_file(self, absolute_path):
        raise FileRemovalError(f"Failed to remove {absolute_path}: permission denied")

    def resolve_absolute_path_from_url(self, url):
        return self.inner.resolve_absolute_path_from_url(url)


@pytest.mark.asyncio
async def test_file_removal_failure_does_not_block_row_delete(
    memory_image_repository, file_storage, png_bytes
):
    """Test an I/O error while removing a file is logged and the row still goes."""
    service = ImageLifecycleService(memory_image_repository, FailingFileStorage(file_storage))
    image = await service.save_single_image(_command(png_bytes))

    await service.delete_image_by_id(image.id)

    assert image.id not in memory_image_repository.images
