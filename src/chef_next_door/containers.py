"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import Client, ClientOptions, create_client

from chef_next_door.adapters.supabase_auth_client import SupabaseAuthClient
from chef_next_door.adapters.supabase_image_storage import SupabaseImageStorage
from chef_next_door.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from chef_next_door.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from chef_next_door.config import Settings
from chef_next_door.services.hooks import ReadHooks
from chef_next_door.services.images import ImageService
from chef_next_door.services.mutations import MutationHelpers
from chef_next_door.services.profiles import ProfileService
from chef_next_door.services.query_client import GlobalErrorHandler, QueryClient
from chef_next_door.services.recipes import RecipeService
from chef_next_door.services.search import SearchService
from chef_next_door.services.session import AuthService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    profile_service: ProfileService
    recipe_service: RecipeService
    search_service: SearchService
    image_service: ImageService
    query_client: QueryClient
    hooks: ReadHooks
    mutations: MutationHelpers


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    auth_service = AuthService(SupabaseAuthClient(_auth_client(resolved_settings)))
    profile_service = ProfileService(profile_repository)
    recipe_service = RecipeService(recipe_repository, profile_repository)
    search_service = SearchService(recipe_service, profile_repository)
    image_service = ImageService(
        SupabaseImageStorage(supabase_client, resolved_settings.storage_bucket)
    )
    query_client = QueryClient.from_settings(
        resolved_settings,
        on_error=GlobalErrorHandler(login_path=resolved_settings.login_path),
    )

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        profile_service=profile_service,
        recipe_service=recipe_service,
        search_service=search_service,
        image_service=image_service,
        query_client=query_client,
        hooks=ReadHooks(query_client, profile_service, recipe_service, search_service),
        mutations=MutationHelpers(profile_service, recipe_service),
    )


def _auth_client(settings: Settings) -> Client:
    """Build the client used only for auth flows.

    Signing in on a client rewrites its Authorization header to the user's
    token, so the data client must never be used for sign-in.
    """
    return create_client(
        settings.supabase_url,
        settings.supabase_service_key,
        options=ClientOptions(persist_session=False, auto_refresh_token=False),
    )
