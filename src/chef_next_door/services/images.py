"""Image uploads to object storage."""

import mimetypes
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Protocol
from uuid import UUID, uuid4

from chef_next_door.domain.errors import FormValidationError
from chef_next_door.services.session import SessionContext

IMAGE_CATEGORIES = frozenset({"recipes", "avatars"})


class ImageStorage(Protocol):
    """Interface for the object storage bucket."""

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        """Store bytes at a path."""

    def public_url(self, path: str) -> str:
        """Return the public URL for a stored path."""


def image_path(user_id: UUID, category: str, image_id: UUID, extension: str) -> str:
    """Build the storage path ``users/{user}/{category}/{uuid}.{ext}``."""
    return f"users/{user_id}/{category}/{image_id}.{extension}"


@dataclass
class ImageService:
    """Uploads user images and returns their public URLs."""

    storage: ImageStorage
    id_factory: Callable[[], UUID] = field(default=uuid4)

    async def upload_image(
        self,
        session: SessionContext,
        filename: str,
        content: bytes,
        category: str = "recipes",
    ) -> str:
        errors: dict[str, str] = {}
        extension = PurePosixPath(filename).suffix.lstrip(".").lower()
        if not extension:
            errors["filename"] = "Image file needs an extension"
        if not content:
            errors["content"] = "Image file is empty"
        if category not in IMAGE_CATEGORIES:
            errors["category"] = "Unknown image category"
        if errors:
            raise FormValidationError(errors)
        user = session.require_user()
        path = image_path(user.id, category, self.id_factory(), extension)
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        self.storage.upload(path, content, content_type)
        return self.storage.public_url(path)
