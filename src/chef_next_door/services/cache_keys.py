"""Cache key registry.

Keys are pure functions of their inputs: a namespace tag, optionally followed
by ``:`` and a canonical JSON rendering of every parameter that affects the
result set. Equal inputs always produce byte-identical keys.
"""

import json
from uuid import UUID

from chef_next_door.domain.queries import (
    GlobalSearchOptions,
    RecipeListOptions,
    RecipeSearchOptions,
)

PROFILE = "profile"
USER_RECIPES = "user-recipes"
RECIPE = "recipe"
ALL_RECIPES = "all-recipes"
SEARCH_RECIPES = "search-recipes"
GLOBAL_SEARCH = "global-search"

_SEPARATOR = ":"


def _canonical(params: dict[str, object]) -> str:
    return json.dumps(params, sort_keys=True, separators=(",", ":"))


def _join(namespace: str, suffix: str) -> str:
    return f"{namespace}{_SEPARATOR}{suffix}"


def profile(user_id: UUID) -> str:
    return _join(PROFILE, str(user_id))


def user_recipes(user_id: UUID) -> str:
    return _join(USER_RECIPES, str(user_id))


def recipe(recipe_id: UUID | str | None) -> str | None:
    """Key for one recipe, or ``None`` while the id is still unknown."""
    if not recipe_id:
        return None
    return _join(RECIPE, str(recipe_id))


def all_recipes(options: RecipeListOptions | None = None) -> str:
    params = options.to_params() if options else {}
    if not params:
        return ALL_RECIPES
    return _join(ALL_RECIPES, _canonical(params))


def search_recipes(
    query: str | None, options: RecipeSearchOptions | None = None
) -> str | None:
    """Key for a text search; blank queries suspend the subscription."""
    if query is None or not query.strip():
        return None
    params = options.to_params() if options else {}
    return _join(SEARCH_RECIPES, _canonical({"query": query, **params}))


def global_search(
    query: str | None, options: GlobalSearchOptions | None = None
) -> str | None:
    """Key for a combined recipe/profile search; blank queries suspend."""
    if query is None or not query.strip():
        return None
    params = (options or GlobalSearchOptions()).to_params()
    return _join(GLOBAL_SEARCH, _canonical({"query": query, **params}))


def in_namespace(key: str, namespace: str) -> bool:
    """Return True for the bare namespace key and any parameterized variant."""
    return key == namespace or key.startswith(namespace + _SEPARATOR)
