"""Supabase-backed recipe repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from chef_next_door.adapters.supabase_support import (
    backend_errors,
    ilike_pattern,
    parse_timestamp,
)
from chef_next_door.domain.errors import BackendError
from chef_next_door.domain.models import ChefSummary, Difficulty, Recipe
from chef_next_door.domain.queries import RecipeListOptions, RecipeSearchOptions
from chef_next_door.services.recipes import RecipeRepository

RECIPE_COLUMNS = "*, chef:profiles!chef_id (id, first_name, last_name, avatar_url)"
DEFAULT_PAGE_SIZE = 10

# Domain field name -> column name, where they differ.
_COLUMN_NAMES = {
    "difficulty": "difficulty_level",
    "category": "cuisine_type",
}


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes and ratings."""

    client: Client

    def list_recipes(self, options: RecipeListOptions) -> list[Recipe]:
        """Return recipes newest first, filtered by the options."""
        query = (
            self.client.table("recipes")
            .select(RECIPE_COLUMNS)
            .order("created_at", desc=True)
        )
        if options.limit:
            query = query.limit(options.limit)
        if options.offset:
            page_size = options.limit or DEFAULT_PAGE_SIZE
            query = query.range(options.offset, options.offset + page_size - 1)
        if options.featured is not None:
            query = query.eq("featured", options.featured)
        if options.difficulty:
            query = query.eq("difficulty_level", options.difficulty)
        if options.tags:
            query = query.ov("tags", list(options.tags))
        with backend_errors("fetch recipes"):
            response = query.execute()
        return [_parse_recipe(row) for row in response.data or []]

    def list_chef_recipes(self, chef_id: UUID) -> list[Recipe]:
        """Return one chef's recipes newest first."""
        with backend_errors("fetch user recipes"):
            response = (
                self.client.table("recipes")
                .select(RECIPE_COLUMNS)
                .eq("chef_id", str(chef_id))
                .order("created_at", desc=True)
                .execute()
            )
        return [_parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe with its chef summary, if present."""
        with backend_errors("fetch recipe"):
            response = (
                self.client.table("recipes")
                .select(RECIPE_COLUMNS)
                .eq("id", str(recipe_id))
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def create_recipe(self, chef_id: UUID, fields: dict[str, object]) -> Recipe:
        """Insert a recipe with zeroed aggregates and return it."""
        payload = {
            **_to_columns(fields),
            "chef_id": str(chef_id),
            "rating": 0,
            "total_reviews": 0,
            "featured": False,
        }
        with backend_errors("create recipe"):
            response = self.client.table("recipes").insert(payload).execute()
        if not response.data:
            raise BackendError("create recipe", "no row returned")
        return _parse_recipe(response.data[0])

    def update_recipe(
        self, recipe_id: UUID, chef_id: UUID, fields: dict[str, object]
    ) -> Recipe | None:
        """Update a recipe only where both id and owner match."""
        with backend_errors("update recipe"):
            response = (
                self.client.table("recipes")
                .update(_to_columns(fields))
                .eq("id", str(recipe_id))
                .eq("chef_id", str(chef_id))
                .execute()
            )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: UUID, chef_id: UUID) -> bool:
        """Delete a recipe only where both id and owner match."""
        with backend_errors("delete recipe"):
            response = (
                self.client.table("recipes")
                .delete()
                .eq("id", str(recipe_id))
                .eq("chef_id", str(chef_id))
                .execute()
            )
        return bool(response.data)

    def search_recipes(self, query: str, options: RecipeSearchOptions) -> list[Recipe]:
        """Match title or description, newest first."""
        pattern = ilike_pattern(query)
        if pattern is None:
            return []
        builder = (
            self.client.table("recipes")
            .select(RECIPE_COLUMNS)
            .or_(f"title.ilike.{pattern},description.ilike.{pattern}")
            .order("created_at", desc=True)
        )
        if options.limit:
            builder = builder.limit(options.limit)
        if options.difficulty:
            builder = builder.eq("difficulty_level", options.difficulty)
        if options.tags:
            builder = builder.ov("tags", list(options.tags))
        with backend_errors("search recipes"):
            response = builder.execute()
        return [_parse_recipe(row) for row in response.data or []]

    def upsert_rating(self, recipe_id: UUID, user_id: UUID, rating: int) -> None:
        """Insert or replace the (recipe, user) rating row."""
        with backend_errors("rate recipe"):
            self.client.table("recipe_ratings").upsert(
                {
                    "recipe_id": str(recipe_id),
                    "user_id": str(user_id),
                    "rating": rating,
                },
                on_conflict="recipe_id,user_id",
            ).execute()


def _to_columns(fields: dict[str, object]) -> dict[str, object]:
    return {_COLUMN_NAMES.get(name, name): value for name, value in fields.items()}


def _parse_difficulty(raw: object) -> Difficulty | None:
    try:
        return Difficulty(raw)
    except ValueError:
        return None


def _parse_chef(raw: object) -> ChefSummary | None:
    if not isinstance(raw, dict) or not raw.get("id"):
        return None
    return ChefSummary(
        id=UUID(str(raw["id"])),
        first_name=str(raw.get("first_name") or ""),
        last_name=str(raw.get("last_name") or ""),
        avatar_url=raw.get("avatar_url"),
    )


def _parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipes row (optionally with embedded chef) into a domain model."""
    return Recipe(
        id=UUID(str(row["id"])),
        chef_id=UUID(str(row["chef_id"])),
        title=str(row.get("title") or ""),
        description=row.get("description"),
        ingredients=list(row.get("ingredients") or []),
        instructions=list(row.get("instructions") or []),
        prep_time=row.get("prep_time"),
        cook_time=row.get("cook_time"),
        servings=row.get("servings"),
        difficulty=_parse_difficulty(row.get("difficulty_level")),
        category=row.get("cuisine_type"),
        tags=list(row.get("tags") or []),
        image_url=row.get("image_url"),
        featured=bool(row.get("featured", False)),
        rating=float(row.get("rating") or 0.0),
        total_reviews=int(row.get("total_reviews") or 0),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
        chef=_parse_chef(row.get("chef")),
    )
