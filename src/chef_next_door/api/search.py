"""Search endpoints."""

from fastapi import APIRouter, Request

from chef_next_door.api.deps import get_container
from chef_next_door.config import parse_tags
from chef_next_door.domain.queries import GlobalSearchOptions, RecipeSearchOptions

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/recipes")
async def search_recipes(  # noqa: PLR0913
    request: Request,
    q: str = "",
    limit: int | None = None,
    difficulty: str | None = None,
    tags: str | None = None,
) -> dict[str, object]:
    """Search recipe titles and descriptions. A blank query returns nothing."""
    container = get_container(request)
    options = RecipeSearchOptions(
        limit=limit, difficulty=difficulty, tags=parse_tags(tags)
    )
    return {"recipes": await container.hooks.read_search_recipes(q, options)}


@router.get("")
async def global_search(
    request: Request,
    q: str = "",
    limit: int | None = None,
    include_recipes: bool = True,
    include_profiles: bool = True,
) -> dict[str, object]:
    container = get_container(request)
    options = GlobalSearchOptions(
        include_recipes=include_recipes,
        include_profiles=include_profiles,
        limit=limit,
    )
    result = await container.hooks.read_global_search(q, options)
    return {"recipes": result.recipes, "profiles": result.profiles}
