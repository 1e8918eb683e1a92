"""Supabase Auth adapter."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from chef_next_door.adapters.supabase_support import backend_errors
from chef_next_door.domain.errors import BackendError, NotAuthenticatedError
from chef_next_door.domain.models import AuthUser
from chef_next_door.services.session import AuthClient

logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthClient(AuthClient):
    """Auth flows backed by Supabase Auth."""

    client: Client

    async def sign_in(self, email: str, password: str) -> tuple[AuthUser, str]:
        """Sign in with a password and return the user and access token."""
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as error:
            raise NotAuthenticatedError(error.message) from error
        if response.user is None or response.session is None:
            raise NotAuthenticatedError("Login failed")
        return _to_auth_user(response.user), response.session.access_token

    async def sign_up(
        self, email: str, password: str, metadata: dict[str, object]
    ) -> AuthUser:
        """Create an identity; the profile row is created by the backend."""
        try:
            response = self.client.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": metadata},
                }
            )
        except AuthError as error:
            raise BackendError("sign up", error.message) from error
        if response.user is None:
            raise BackendError("sign up", "no user returned")
        return _to_auth_user(response.user)

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token."""
        with backend_errors("sign out"):
            self.client.auth.admin.sign_out(access_token)

    async def get_user(self, access_token: str) -> AuthUser | None:
        """Validate a token; invalid or expired tokens yield None."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as error:
            logger.info("Rejected access token: %s", error.message)
            return None
        if response is None or response.user is None:
            return None
        return _to_auth_user(response.user)


def _to_auth_user(user: object) -> AuthUser:
    return AuthUser(id=UUID(str(user.id)), email=getattr(user, "email", None))
