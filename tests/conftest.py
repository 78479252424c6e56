"""
Pytest configuration and shared fixtures.
"""

import uuid
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from brands.domain.brand import Brand
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import BrandNotFoundError
from core.domain.value_objects import ImageType
from images.application.services.image_lifecycle_service import ImageLifecycleService
from images.domain.image import Image
from images.infrastructure.repositories.django_image_repository import DjangoImageRepository
from images.infrastructure.storage import LocalFileStorage, UploadPathResolver
from images.ports.image_repository import ImageRepository


class InMemoryBrandRepository(BrandRepository):
    """BrandRepository kept in a dict, for handler tests."""

    def __init__(self):
        self.brands: Dict[uuid.UUID, Brand] = {}
        self.fail_on_save = False

    async def save(self, brand: Brand) -> Brand:
        if self.fail_on_save:
            raise RuntimeError("database unavailable")
        self.brands[brand.id] = brand
        return brand

    async def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        return self.brands.get(brand_id)

    async def find_by_slug(self, slug: str) -> Optional[Brand]:
        return next((b for b in self.brands.values() if str(b.slug) == slug), None)

    async def find_by_title(self, title: str) -> Optional[Brand]:
        return next((b for b in self.brands.values() if b.title == title.strip()), None)

    async def exists(self, brand_id: uuid.UUID) -> bool:
        return brand_id in self.brands

    async def list_all(self, published_only: bool = False) -> List[Brand]:
        brands = [b for b in self.brands.values() if b.published or not published_only]
        return sorted(brands, key=lambda b: (b.sort_order, b.title))

    async def delete(self, brand_id: uuid.UUID) -> None:
        self.brands.pop(brand_id, None)

    async def update_sort_orders(self, entries: Sequence[Tuple[uuid.UUID, int]]) -> int:
        missing = [brand_id for brand_id, _ in entries if brand_id not in self.brands]
        if missing:
            raise BrandNotFoundError(f"Brand {missing[0]} not found")
        for brand_id, sort_order in entries:
            self.brands[brand_id] = replace(self.brands[brand_id], sort_order=sort_order)
        return len(entries)


class InMemoryImageRepository(ImageRepository):
    """ImageRepository kept in a dict that records every call."""

    def __init__(self):
        self.images: Dict[uuid.UUID, Image] = {}
        self.calls: List[str] = []

    async def save(self, image: Image) -> Image:
        self.calls.append("save")
        self.images[image.id] = image
        return image

    async def find_by_id(self, image_id: uuid.UUID) -> Optional[Image]:
        self.calls.append("find_by_id")
        return self.images.get(image_id)

    async def find_by_ids(self, image_ids: Iterable[uuid.UUID]) -> List[Image]:
        self.calls.append("find_by_ids")
        return [self.images[i] for i in image_ids if i in self.images]

    async def find_by_parent(
        self, parent_id: uuid.UUID, image_type: Optional[ImageType] = None
    ) -> List[Image]:
        self.calls.append("find_by_parent")
        return [
            image
            for image in self.images.values()
            if image.parent_id == parent_id and (image_type is None or image.type == image_type)
        ]

    async def delete(self, image_id: uuid.UUID) -> None:
        self.calls.append("delete")
        self.images.pop(image_id, None)

    async def delete_many(self, image_ids: Iterable[uuid.UUID]) -> int:
        self.calls.append("delete_many")
        deleted = 0
        for image_id in list(image_ids):
            if self.images.pop(image_id, None) is not None:
                deleted += 1
        return deleted


class RecordingFileStorage(LocalFileStorage):
    """LocalFileStorage that remembers which paths it was asked to remove."""

    def __init__(self, resolver: UploadPathResolver):
        super().__init__(resolver)
        self.deleted_paths: List[Path] = []

    async def delete_file(self, absolute_path: Path) -> bool:
        self.deleted_paths.append(absolute_path)
        return await super().delete_file(absolute_path)


@pytest.fixture
def upload_root(tmp_path, settings):
    """Point uploads at a per-test directory."""
    root = tmp_path / "uploads"
    settings.UPLOAD_ROOT = root
    return root


@pytest.fixture
def path_resolver(upload_root):
    """Fixture for UploadPathResolver."""
    return UploadPathResolver(upload_root, "/uploads/")


@pytest.fixture
def file_storage(path_resolver):
    """Fixture for a recording local FileStorage."""
    return RecordingFileStorage(path_resolver)


@pytest.fixture
def memory_brand_repository():
    """Fixture for an in-memory BrandRepository."""
    return InMemoryBrandRepository()


@pytest.fixture
def memory_image_repository():
    """Fixture for an in-memory ImageRepository."""
    return InMemoryImageRepository()


@pytest.fixture
def image_service(memory_image_repository, file_storage):
    """Fixture for ImageLifecycleService over in-memory metadata and real disk."""
    return ImageLifecycleService(
        image_repository=memory_image_repository,
        file_storage=file_storage,
    )


@pytest.fixture
def brand_repository():
    """Fixture for BrandRepository."""
    return DjangoBrandRepository()


@pytest.fixture
def image_repository():
    """Fixture for ImageRepository."""
    return DjangoImageRepository()


@pytest.fixture
def sample_brand():
    """Fixture for a sample Brand entity."""
    unique_id = str(uuid.uuid4())[:8]
    return Brand.create(title=f"TestBrand {unique_id}", country_code="fr")


@pytest.fixture
def db_brand(db, brand_repository):
    """Fixture for a Brand row saved in database."""
    from brands.infrastructure.models import Brand as BrandModel

    unique_id = str(uuid.uuid4()).replace("-", "")[:8]
    brand = Brand.create(title=f"TestBrand {unique_id}")
    # pylint: disable=no-member
    model = BrandModel.objects.create(id=brand.id, **brand_repository._fields(brand))
    return brand_repository._to_domain(model)


@pytest.fixture
def png_bytes():
    """Fixture for a tiny PNG payload."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture(scope="session")
def _span_exporter():
    """Install an in-memory tracer provider once per session."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    return exporter


@pytest.fixture
def span_exporter(_span_exporter):
    """Fixture for the spans finished during one test."""
    _span_exporter.clear()
    yield _span_exporter
    _span_exporter.clear()
