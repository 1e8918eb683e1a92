"""Writes paired with the cache commands they imply.

Each helper awaits its write first and only then returns commands, so an
invalidation can never be applied for a write that did not succeed.
"""

from dataclasses import dataclass
from uuid import UUID

from chef_next_door.domain.cache import (
    CacheCommand,
    MutationResult,
    invalidate,
    invalidate_namespace,
    purge,
    replace,
)
from chef_next_door.domain.models import RecipeDraft
from chef_next_door.services import cache_keys
from chef_next_door.services.profiles import ProfileService
from chef_next_door.services.recipes import RecipeService
from chef_next_door.services.session import SessionContext


def _recipe_list_commands(user_id: UUID) -> list[CacheCommand]:
    # Every view that embeds copies of recipe rows.
    return [
        invalidate(cache_keys.user_recipes(user_id)),
        invalidate_namespace(cache_keys.ALL_RECIPES),
        invalidate_namespace(cache_keys.SEARCH_RECIPES),
        invalidate_namespace(cache_keys.GLOBAL_SEARCH),
    ]


@dataclass
class MutationHelpers:
    """Mutation helpers for profiles and recipes."""

    profile_service: ProfileService
    recipe_service: RecipeService

    async def update_profile(
        self, session: SessionContext, fields: dict[str, object]
    ) -> MutationResult:
        profile = await self.profile_service.update_profile(session, fields)
        return MutationResult(
            value=profile,
            commands=[replace(cache_keys.profile(profile.id), profile)],
        )

    async def create_recipe(
        self, session: SessionContext, draft: RecipeDraft
    ) -> MutationResult:
        recipe = await self.recipe_service.create_recipe(session, draft)
        return MutationResult(
            value=recipe,
            commands=[
                invalidate(cache_keys.profile(recipe.chef_id)),
                *_recipe_list_commands(recipe.chef_id),
            ],
        )

    async def update_recipe(
        self, session: SessionContext, recipe_id: UUID, fields: dict[str, object]
    ) -> MutationResult:
        recipe = await self.recipe_service.update_recipe(session, recipe_id, fields)
        return MutationResult(
            value=recipe,
            commands=[
                replace(cache_keys.recipe(recipe.id), recipe),
                *_recipe_list_commands(recipe.chef_id),
            ],
        )

    async def delete_recipe(
        self, session: SessionContext, recipe_id: UUID
    ) -> MutationResult:
        user = session.require_user()
        await self.recipe_service.delete_recipe(session, recipe_id)
        return MutationResult(
            value=None,
            commands=[
                purge(cache_keys.recipe(recipe_id)),
                invalidate(cache_keys.profile(user.id)),
                *_recipe_list_commands(user.id),
            ],
        )

    async def rate_recipe(
        self, session: SessionContext, recipe_id: UUID, rating: int
    ) -> MutationResult:
        await self.recipe_service.rate_recipe(session, recipe_id, rating)
        return MutationResult(
            value=None,
            commands=[invalidate(cache_keys.recipe(recipe_id))],
        )
