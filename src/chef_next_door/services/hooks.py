"""Read hooks: cache keys bound to resource access functions."""

from dataclasses import dataclass
from uuid import UUID

from chef_next_door.domain.models import GlobalSearchResult, Profile, Recipe
from chef_next_door.domain.queries import (
    GlobalSearchOptions,
    RecipeListOptions,
    RecipeSearchOptions,
)
from chef_next_door.services import cache_keys
from chef_next_door.services.profiles import ProfileService
from chef_next_door.services.query_client import QueryClient, Subscription
from chef_next_door.services.recipes import RecipeService
from chef_next_door.services.search import SearchService
from chef_next_door.services.session import SessionContext


@dataclass
class ReadHooks:
    """Subscriptions and one-shot cached reads for every resource.

    ``use_*`` methods return live subscriptions; ``read_*`` methods resolve
    once through the same keys, so both share cache entries and dedupe.
    """

    client: QueryClient
    profile_service: ProfileService
    recipe_service: RecipeService
    search_service: SearchService

    async def use_profile(
        self, session: SessionContext, user_id: UUID | None = None
    ) -> Subscription:
        target_id = user_id or session.require_user().id
        return await self.client.subscribe(
            cache_keys.profile(target_id),
            lambda: self.profile_service.get_profile(session, target_id),
        )

    async def use_user_recipes(
        self, session: SessionContext, user_id: UUID | None = None
    ) -> Subscription:
        chef_id = user_id or session.require_user().id
        return await self.client.subscribe(
            cache_keys.user_recipes(chef_id),
            lambda: self.recipe_service.get_user_recipes(session, chef_id),
        )

    async def use_recipe(self, recipe_id: UUID | None) -> Subscription:
        return await self.client.subscribe(
            cache_keys.recipe(recipe_id),
            lambda: self.recipe_service.get_recipe(recipe_id),
        )

    async def use_all_recipes(
        self, options: RecipeListOptions | None = None
    ) -> Subscription:
        return await self.client.subscribe(
            cache_keys.all_recipes(options),
            lambda: self.recipe_service.get_all_recipes(options),
        )

    async def use_search_recipes(
        self, query: str, options: RecipeSearchOptions | None = None
    ) -> Subscription:
        return await self.client.subscribe(
            cache_keys.search_recipes(query, options),
            lambda: self.recipe_service.search_recipes(query, options),
        )

    async def use_global_search(
        self, query: str, options: GlobalSearchOptions | None = None
    ) -> Subscription:
        return await self.client.subscribe(
            cache_keys.global_search(query, options),
            lambda: self.search_service.global_search(query, options),
        )

    async def read_profile(
        self, session: SessionContext, user_id: UUID | None = None
    ) -> Profile:
        target_id = user_id or session.require_user().id
        return await self.client.fetch(
            cache_keys.profile(target_id),
            lambda: self.profile_service.get_profile(session, target_id),
        )

    async def read_user_recipes(
        self, session: SessionContext, user_id: UUID | None = None
    ) -> list[Recipe]:
        chef_id = user_id or session.require_user().id
        return await self.client.fetch(
            cache_keys.user_recipes(chef_id),
            lambda: self.recipe_service.get_user_recipes(session, chef_id),
        )

    async def read_recipe(self, recipe_id: UUID) -> Recipe:
        return await self.client.fetch(
            cache_keys.recipe(recipe_id),
            lambda: self.recipe_service.get_recipe(recipe_id),
        )

    async def read_all_recipes(
        self, options: RecipeListOptions | None = None
    ) -> list[Recipe]:
        return await self.client.fetch(
            cache_keys.all_recipes(options),
            lambda: self.recipe_service.get_all_recipes(options),
        )

    async def read_search_recipes(
        self, query: str, options: RecipeSearchOptions | None = None
    ) -> list[Recipe]:
        """Cached search; a blank query performs no request and returns nothing."""
        key = cache_keys.search_recipes(query, options)
        if key is None:
            return []
        return await self.client.fetch(
            key, lambda: self.recipe_service.search_recipes(query, options)
        )

    async def read_global_search(
        self, query: str, options: GlobalSearchOptions | None = None
    ) -> GlobalSearchResult:
        key = cache_keys.global_search(query, options)
        if key is None:
            return GlobalSearchResult()
        return await self.client.fetch(
            key, lambda: self.search_service.global_search(query, options)
        )
