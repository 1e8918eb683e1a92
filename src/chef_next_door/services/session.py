"""Session context and authentication flows."""

import logging
from dataclasses import dataclass
from typing import Protocol

from chef_next_door.domain.errors import NotAuthenticatedError
from chef_next_door.domain.models import AuthUser, Registration
from chef_next_door.services.validation import validate_registration

logger = logging.getLogger(__name__)


class AuthClient(Protocol):
    """Interface to the hosted auth provider."""

    async def sign_in(self, email: str, password: str) -> tuple[AuthUser, str]:
        """Sign in and return the identity with its access token."""

    async def sign_up(
        self, email: str, password: str, metadata: dict[str, object]
    ) -> AuthUser:
        """Register a new identity."""

    async def sign_out(self, access_token: str) -> None:
        """Revoke a session."""

    async def get_user(self, access_token: str) -> AuthUser | None:
        """Return the identity behind an access token, if it is valid."""


@dataclass(frozen=True)
class SessionContext:
    """Who is calling. Passed explicitly to every ownership-aware operation."""

    user: AuthUser | None = None
    access_token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def require_user(self) -> AuthUser:
        """Return the current user or fail with ``NotAuthenticatedError``."""
        if self.user is None:
            raise NotAuthenticatedError()
        return self.user


ANONYMOUS = SessionContext()


@dataclass
class AuthService:
    """Application service for sign-in, sign-up and session resolution."""

    client: AuthClient

    async def sign_in(self, email: str, password: str) -> SessionContext:
        """Sign in with email and password."""
        user, token = await self.client.sign_in(email.strip(), password)
        logger.info("User %s signed in", user.id)
        return SessionContext(user=user, access_token=token)

    async def sign_up(self, registration: Registration) -> AuthUser:
        """Validate the registration form, then create the identity."""
        validate_registration(registration)
        user = await self.client.sign_up(
            registration.email.strip(),
            registration.password,
            {
                "first_name": registration.first_name.strip(),
                "last_name": registration.last_name.strip(),
            },
        )
        logger.info("Registered user %s", user.id)
        return user

    async def sign_out(self, session: SessionContext) -> None:
        """End the caller's session."""
        session.require_user()
        if session.access_token:
            await self.client.sign_out(session.access_token)

    async def resolve_session(self, access_token: str | None) -> SessionContext:
        """Build a session from a bearer token; missing or invalid tokens are anonymous."""
        if not access_token:
            return ANONYMOUS
        user = await self.client.get_user(access_token)
        if user is None:
            return ANONYMOUS
        return SessionContext(user=user, access_token=access_token)
