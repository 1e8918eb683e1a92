"""Supabase Storage adapter for user images."""

from dataclasses import dataclass

from supabase import Client

from chef_next_door.adapters.supabase_support import backend_errors
from chef_next_door.domain.errors import BackendError
from chef_next_door.services.images import ImageStorage


@dataclass
class SupabaseImageStorage(ImageStorage):
    """Stores images in a public Supabase Storage bucket."""

    client: Client
    bucket: str

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        """Upload bytes to the bucket."""
        with backend_errors("upload image"):
            self.client.storage.from_(self.bucket).upload(
                path, content, {"content-type": content_type}
            )

    def public_url(self, path: str) -> str:
        """Return the public URL of an uploaded object."""
        with backend_errors("resolve image URL"):
            url = self.client.storage.from_(self.bucket).get_public_url(path)
        if not url:
            raise BackendError("resolve image URL", f"no public URL for {path}")
        return url
