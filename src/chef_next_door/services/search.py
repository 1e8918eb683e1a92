"""Combined recipe and chef search."""

from dataclasses import dataclass

from chef_next_door.domain.models import GlobalSearchResult
from chef_next_door.domain.queries import GlobalSearchOptions, RecipeSearchOptions
from chef_next_door.services.profiles import ProfileRepository
from chef_next_door.services.recipes import RecipeService

DEFAULT_PROFILE_LIMIT = 10


@dataclass
class SearchService:
    """Searches recipes and profiles with one query."""

    recipe_service: RecipeService
    profile_repository: ProfileRepository

    async def global_search(
        self, query: str, options: GlobalSearchOptions | None = None
    ) -> GlobalSearchResult:
        resolved = options or GlobalSearchOptions()
        cleaned = query.strip()
        if not cleaned:
            return GlobalSearchResult()
        recipes = []
        profiles = []
        if resolved.include_recipes:
            recipes = await self.recipe_service.search_recipes(
                cleaned, RecipeSearchOptions(limit=resolved.limit)
            )
        if resolved.include_profiles:
            profiles = self.profile_repository.search_profiles(
                cleaned, resolved.limit or DEFAULT_PROFILE_LIMIT
            )
        return GlobalSearchResult(recipes=recipes, profiles=profiles)
