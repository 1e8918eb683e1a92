"""Chef profile reads and edits."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from chef_next_door.domain.errors import NotFoundError
from chef_next_door.domain.models import Profile
from chef_next_door.services.session import SessionContext
from chef_next_door.services.validation import validate_profile_update


class ProfileRepository(Protocol):
    """Persistence interface for chef profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return a profile by id, if present."""

    def update_profile(self, user_id: UUID, fields: dict[str, object]) -> Profile | None:
        """Write the given fields and return the updated profile, if it exists."""

    def search_profiles(self, query: str, limit: int) -> list[Profile]:
        """Match first name, last name or bio case-insensitively."""

    def increment_recipe_count(self, user_id: UUID) -> None:
        """Add one to the chef's recipe count."""

    def decrement_recipe_count(self, user_id: UUID) -> None:
        """Subtract one from the chef's recipe count."""


@dataclass
class ProfileService:
    """Application service for profile operations."""

    repository: ProfileRepository

    async def get_profile(
        self, session: SessionContext, user_id: UUID | None = None
    ) -> Profile:
        """Return a profile, defaulting to the caller's own."""
        target_id = user_id or session.require_user().id
        profile = self.repository.get_profile(target_id)
        if profile is None:
            raise NotFoundError("profile", target_id)
        return profile

    async def get_current_profile(self, session: SessionContext) -> Profile:
        return await self.get_profile(session, session.require_user().id)

    async def update_profile(
        self, session: SessionContext, fields: dict[str, object]
    ) -> Profile:
        """Write only the supplied fields of the caller's profile."""
        user = session.require_user()
        validate_profile_update(fields)
        updated = self.repository.update_profile(user.id, fields)
        if updated is None:
            raise NotFoundError("profile", user.id)
        return updated
