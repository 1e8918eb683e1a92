"""Sign-in, sign-up and sign-out endpoints."""

from fastapi import APIRouter, Depends, Request, status

from chef_next_door.api.deps import get_container, get_session
from chef_next_door.api.schemas import SignInRequest, SignUpRequest
from chef_next_door.domain.models import Registration
from chef_next_door.services.session import SessionContext

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-in")
async def sign_in(payload: SignInRequest, request: Request) -> dict[str, object]:
    """Exchange credentials for an access token."""
    container = get_container(request)
    session = await container.auth_service.sign_in(payload.email, payload.password)
    return {"user": session.user, "access_token": session.access_token}


@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
async def sign_up(payload: SignUpRequest, request: Request) -> dict[str, object]:
    """Register; the caller must verify their email before signing in."""
    container = get_container(request)
    user = await container.auth_service.sign_up(
        Registration(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            password=payload.password,
            confirm_password=payload.confirm_password,
        )
    )
    return {"user": user, "next": "/verify-email"}


@router.post("/sign-out")
async def sign_out(
    request: Request, session: SessionContext = Depends(get_session)
) -> dict[str, str]:
    container = get_container(request)
    await container.auth_service.sign_out(session)
    return {"status": "ok"}
