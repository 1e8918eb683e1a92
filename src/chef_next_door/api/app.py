"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from chef_next_door.api.auth import router as auth_router
from chef_next_door.api.images import router as images_router
from chef_next_door.api.profiles import router as profiles_router
from chef_next_door.api.recipes import router as recipes_router
from chef_next_door.api.search import router as search_router
from chef_next_door.app_logging import configure_logging
from chef_next_door.containers import AppContainer
from chef_next_door.domain.errors import (
    ChefNextDoorError,
    ErrorKind,
    FormValidationError,
)

_STATUS_BY_KIND = {
    ErrorKind.NOT_AUTHENTICATED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 422,
    ErrorKind.BACKEND: 502,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(profiles_router)
    app.include_router(recipes_router)
    app.include_router(search_router)
    app.include_router(images_router)

    @app.exception_handler(ChefNextDoorError)
    async def handle_app_error(
        request: Request, error: ChefNextDoorError
    ) -> JSONResponse:
        """Map normalized errors to HTTP responses."""
        content: dict[str, object] = {"error": error.kind.value, "detail": str(error)}
        if error.kind is ErrorKind.NOT_AUTHENTICATED:
            content["redirect"] = container.settings.login_path
        elif isinstance(error, FormValidationError):
            content["fields"] = error.fields
        elif error.kind is ErrorKind.BACKEND:
            logger.error("Backend failure on %s: %s", request.url.path, error)
        return JSONResponse(status_code=_STATUS_BY_KIND[error.kind], content=content)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
