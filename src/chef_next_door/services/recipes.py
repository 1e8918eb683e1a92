"""Recipe data access: feed, chef lists, publishing, edits and ratings."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from chef_next_door.domain.errors import NotFoundError
from chef_next_door.domain.models import Recipe, RecipeDraft
from chef_next_door.domain.queries import RecipeListOptions, RecipeSearchOptions
from chef_next_door.services.profiles import ProfileRepository
from chef_next_door.services.session import SessionContext
from chef_next_door.services.validation import (
    normalize_tag_input,
    validate_rating,
    validate_recipe_draft,
    validate_recipe_update,
)

logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes and ratings."""

    def list_recipes(self, options: RecipeListOptions) -> list[Recipe]:
        """Return recipes newest first, filtered by the options."""

    def list_chef_recipes(self, chef_id: UUID) -> list[Recipe]:
        """Return one chef's recipes newest first."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""

    def create_recipe(self, chef_id: UUID, fields: dict[str, object]) -> Recipe:
        """Insert a recipe owned by the chef and return it."""

    def update_recipe(
        self, recipe_id: UUID, chef_id: UUID, fields: dict[str, object]
    ) -> Recipe | None:
        """Update a recipe only if the chef owns it; None when nothing matched."""

    def delete_recipe(self, recipe_id: UUID, chef_id: UUID) -> bool:
        """Delete a recipe only if the chef owns it; False when nothing matched."""

    def search_recipes(self, query: str, options: RecipeSearchOptions) -> list[Recipe]:
        """Match title or description case-insensitively, newest first."""

    def upsert_rating(self, recipe_id: UUID, user_id: UUID, rating: int) -> None:
        """Insert or replace the user's rating for a recipe."""


@dataclass
class RecipeService:
    """Application service for recipe operations."""

    repository: RecipeRepository
    profile_repository: ProfileRepository

    async def get_all_recipes(
        self, options: RecipeListOptions | None = None
    ) -> list[Recipe]:
        """Return the community feed; an empty list when nothing matches."""
        return self.repository.list_recipes(options or RecipeListOptions())

    async def get_user_recipes(
        self, session: SessionContext, user_id: UUID | None = None
    ) -> list[Recipe]:
        """Return a chef's recipes, defaulting to the caller."""
        chef_id = user_id or session.require_user().id
        return self.repository.list_chef_recipes(chef_id)

    async def get_recipe(self, recipe_id: UUID) -> Recipe:
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError("recipe", recipe_id)
        return recipe

    async def create_recipe(self, session: SessionContext, draft: RecipeDraft) -> Recipe:
        """Publish a recipe for the caller and bump their recipe count."""
        validate_recipe_draft(draft)
        user = session.require_user()
        recipe = self.repository.create_recipe(
            user.id,
            {
                "title": draft.title.strip(),
                "description": draft.description,
                "ingredients": list(draft.ingredients),
                "instructions": list(draft.instructions),
                "prep_time": draft.prep_time,
                "cook_time": draft.cook_time,
                "servings": draft.servings,
                "difficulty": draft.difficulty,
                "category": draft.category,
                "tags": normalize_tag_input(draft.tags),
                "image_url": draft.image_url,
            },
        )
        logger.info("Chef %s published recipe %s", user.id, recipe.id)
        self._adjust_recipe_count(user.id, increment=True)
        return recipe

    async def update_recipe(
        self, session: SessionContext, recipe_id: UUID, fields: dict[str, object]
    ) -> Recipe:
        """Update the caller's own recipe.

        A recipe owned by someone else fails exactly like a missing one.
        """
        validate_recipe_update(fields)
        user = session.require_user()
        payload = dict(fields)
        if "tags" in payload:
            payload["tags"] = normalize_tag_input(list(payload["tags"]))
        updated = self.repository.update_recipe(recipe_id, user.id, payload)
        if updated is None:
            raise NotFoundError("recipe", recipe_id)
        return updated

    async def delete_recipe(self, session: SessionContext, recipe_id: UUID) -> None:
        """Delete the caller's own recipe and lower their recipe count."""
        user = session.require_user()
        if not self.repository.delete_recipe(recipe_id, user.id):
            raise NotFoundError("recipe", recipe_id)
        logger.info("Chef %s deleted recipe %s", user.id, recipe_id)
        self._adjust_recipe_count(user.id, increment=False)

    async def search_recipes(
        self, query: str, options: RecipeSearchOptions | None = None
    ) -> list[Recipe]:
        """Search title and description; a blank query returns no rows."""
        if not query.strip():
            return []
        return self.repository.search_recipes(
            query.strip(), options or RecipeSearchOptions()
        )

    async def rate_recipe(
        self, session: SessionContext, recipe_id: UUID, rating: int
    ) -> None:
        """Record the caller's rating; aggregates are maintained by the backend."""
        value = validate_rating(rating)
        user = session.require_user()
        self.repository.upsert_rating(recipe_id, user.id, value)

    def _adjust_recipe_count(self, user_id: UUID, *, increment: bool) -> None:
        # The count is cosmetic; a failed RPC must not fail the recipe write.
        try:
            if increment:
                self.profile_repository.increment_recipe_count(user_id)
            else:
                self.profile_repository.decrement_recipe_count(user_id)
        except Exception:
            logger.exception("Failed to update recipe count for %s", user_id)
