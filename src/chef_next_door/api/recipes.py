"""Recipe feed, publishing and editing endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from chef_next_door.api.deps import get_container, get_session
from chef_next_door.api.schemas import (
    RatingRequest,
    RecipeCreateRequest,
    RecipeUpdateRequest,
)
from chef_next_door.config import parse_tags
from chef_next_door.domain.models import RecipeDraft
from chef_next_door.domain.queries import RecipeListOptions
from chef_next_door.services.session import SessionContext

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("")
async def list_recipes(  # noqa: PLR0913
    request: Request,
    limit: int | None = None,
    offset: int | None = None,
    featured: bool | None = None,
    difficulty: str | None = None,
    tags: str | None = None,
) -> dict[str, object]:
    """Return the community feed, newest first."""
    container = get_container(request)
    options = RecipeListOptions(
        limit=limit,
        offset=offset,
        featured=featured,
        difficulty=difficulty,
        tags=parse_tags(tags),
    )
    return {"recipes": await container.hooks.read_all_recipes(options)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipeCreateRequest,
    request: Request,
    session: SessionContext = Depends(get_session),
) -> dict[str, object]:
    """Publish a recipe for the caller."""
    container = get_container(request)
    result = await container.mutations.create_recipe(
        session, RecipeDraft(**payload.model_dump())
    )
    return {"recipe": await container.query_client.commit(result)}


@router.get("/mine")
async def my_recipes(
    request: Request, session: SessionContext = Depends(get_session)
) -> dict[str, object]:
    container = get_container(request)
    return {"recipes": await container.hooks.read_user_recipes(session)}


@router.get("/{recipe_id}")
async def recipe_detail(recipe_id: UUID, request: Request) -> dict[str, object]:
    container = get_container(request)
    return {"recipe": await container.hooks.read_recipe(recipe_id)}


@router.patch("/{recipe_id}")
async def update_recipe(
    recipe_id: UUID,
    payload: RecipeUpdateRequest,
    request: Request,
    session: SessionContext = Depends(get_session),
) -> dict[str, object]:
    """Edit one of the caller's recipes."""
    container = get_container(request)
    result = await container.mutations.update_recipe(
        session, recipe_id, payload.model_dump(exclude_unset=True)
    )
    return {"recipe": await container.query_client.commit(result)}


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: UUID, request: Request, session: SessionContext = Depends(get_session)
) -> None:
    container = get_container(request)
    result = await container.mutations.delete_recipe(session, recipe_id)
    await container.query_client.commit(result)


@router.post("/{recipe_id}/rating")
async def rate_recipe(
    recipe_id: UUID,
    payload: RatingRequest,
    request: Request,
    session: SessionContext = Depends(get_session),
) -> dict[str, str]:
    container = get_container(request)
    result = await container.mutations.rate_recipe(session, recipe_id, payload.rating)
    await container.query_client.commit(result)
    return {"status": "ok"}
