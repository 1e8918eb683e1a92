"""Request-scoped dependencies."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from chef_next_door.containers import AppContainer
from chef_next_door.services.session import SessionContext

auth_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def get_session(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(auth_scheme),
) -> SessionContext:
    """Resolve the caller from an ``Authorization: Bearer`` access token."""
    container = get_container(request)
    token = None
    if credentials is not None and credentials.scheme.lower() == "bearer":
        token = credentials.credentials
    return await container.auth_service.resolve_session(token)
