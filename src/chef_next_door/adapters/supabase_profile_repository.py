"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from chef_next_door.adapters.supabase_support import (
    backend_errors,
    ilike_pattern,
    parse_timestamp,
)
from chef_next_door.domain.models import Profile
from chef_next_door.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return a profile by id, if present."""
        with backend_errors("fetch profile"):
            response = (
                self.client.table("profiles")
                .select("*")
                .eq("id", str(user_id))
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_profile(self, user_id: UUID, fields: dict[str, object]) -> Profile | None:
        """Update the given columns and return the updated row."""
        with backend_errors("update profile"):
            response = (
                self.client.table("profiles")
                .update(fields)
                .eq("id", str(user_id))
                .execute()
            )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def search_profiles(self, query: str, limit: int) -> list[Profile]:
        """Match first name, last name or bio."""
        pattern = ilike_pattern(query)
        if pattern is None:
            return []
        with backend_errors("search profiles"):
            response = (
                self.client.table("profiles")
                .select("*")
                .or_(
                    f"first_name.ilike.{pattern},"
                    f"last_name.ilike.{pattern},"
                    f"bio.ilike.{pattern}"
                )
                .limit(limit)
                .execute()
            )
        return [_parse_profile(row) for row in response.data or []]

    def increment_recipe_count(self, user_id: UUID) -> None:
        """Call the increment_recipe_count RPC."""
        with backend_errors("increment recipe count"):
            self.client.rpc(
                "increment_recipe_count", {"user_id": str(user_id)}
            ).execute()

    def decrement_recipe_count(self, user_id: UUID) -> None:
        """Call the decrement_recipe_count RPC."""
        with backend_errors("decrement recipe count"):
            self.client.rpc(
                "decrement_recipe_count", {"user_id": str(user_id)}
            ).execute()


def _parse_profile(row: dict[str, object]) -> Profile:
    """Parse a profiles row into a domain model."""
    return Profile(
        id=UUID(str(row["id"])),
        email=str(row.get("email") or ""),
        first_name=str(row.get("first_name") or ""),
        last_name=str(row.get("last_name") or ""),
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        rating=float(row.get("rating") or 0.0),
        total_reviews=int(row.get("total_reviews") or 0),
        num_recipes=int(row.get("num_recipes") or 0),
        created_at=parse_timestamp(row.get("created_at")),
    )
