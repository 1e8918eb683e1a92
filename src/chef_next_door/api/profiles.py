"""Profile endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from chef_next_door.api.deps import get_container, get_session
from chef_next_door.api.schemas import ProfileUpdateRequest
from chef_next_door.services.session import SessionContext

router = APIRouter(tags=["profiles"])


@router.get("/profile")
async def current_profile(
    request: Request, session: SessionContext = Depends(get_session)
) -> dict[str, object]:
    """Return the caller's profile."""
    container = get_container(request)
    return {"profile": await container.hooks.read_profile(session)}


@router.patch("/profile")
async def update_profile(
    payload: ProfileUpdateRequest,
    request: Request,
    session: SessionContext = Depends(get_session),
) -> dict[str, object]:
    """Update the caller's profile and refresh its cache entry in place."""
    container = get_container(request)
    result = await container.mutations.update_profile(
        session, payload.model_dump(exclude_unset=True)
    )
    return {"profile": await container.query_client.commit(result)}


@router.get("/profiles/{user_id}")
async def profile_detail(
    user_id: UUID, request: Request, session: SessionContext = Depends(get_session)
) -> dict[str, object]:
    container = get_container(request)
    return {"profile": await container.hooks.read_profile(session, user_id)}
