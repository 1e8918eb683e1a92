"""Tests for image uploads."""

import asyncio
from uuid import UUID

import pytest

from chef_next_door.domain.errors import FormValidationError, NotAuthenticatedError
from chef_next_door.services.images import ImageService, image_path
from chef_next_door.services.session import ANONYMOUS
from tests.conftest import Harness, InMemoryImageStorage

IMAGE_ID = UUID("00000000-0000-0000-0000-000000000001")


def test_upload_stores_under_user_category(harness: Harness) -> None:
    storage = InMemoryImageStorage()
    service = ImageService(storage, id_factory=lambda: IMAGE_ID)

    url = asyncio.run(service.upload_image(harness.session, "Dish.JPG", b"\xff\xd8"))

    path = f"users/{harness.user.id}/recipes/{IMAGE_ID}.jpg"
    assert url == f"https://cdn.example.com/{path}"
    assert storage.objects[path] == (b"\xff\xd8", "image/jpeg")


def test_avatar_category(harness: Harness) -> None:
    storage = InMemoryImageStorage()
    service = ImageService(storage, id_factory=lambda: IMAGE_ID)

    asyncio.run(service.upload_image(harness.session, "me.png", b"png", "avatars"))

    assert list(storage.objects) == [
        image_path(harness.user.id, "avatars", IMAGE_ID, "png")
    ]


def test_invalid_upload_reports_fields(harness: Harness) -> None:
    storage = InMemoryImageStorage()

    with pytest.raises(FormValidationError) as excinfo:
        asyncio.run(
            ImageService(storage).upload_image(harness.session, "noext", b"", "banners")
        )

    assert set(excinfo.value.fields) == {"filename", "content", "category"}
    assert storage.objects == {}


def test_upload_requires_session() -> None:
    with pytest.raises(NotAuthenticatedError):
        asyncio.run(
            ImageService(InMemoryImageStorage()).upload_image(ANONYMOUS, "a.png", b"x")
        )
