"""Domain models for chefs, recipes and ratings."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID


class Difficulty(Enum):
    """Allowed recipe difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class AuthUser:
    """Authenticated identity returned by the auth provider."""

    id: UUID
    email: str | None = None


@dataclass(frozen=True)
class ChefSummary:
    """Public chef fields embedded in recipe rows."""

    id: UUID
    first_name: str
    last_name: str
    avatar_url: str | None = None


@dataclass(frozen=True)
class Profile:
    """A registered user as a recipe author."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    avatar_url: str | None
    bio: str | None
    rating: float
    total_reviews: int
    num_recipes: int
    created_at: datetime | None


@dataclass(frozen=True)
class Recipe:
    """A published dish."""

    id: UUID
    chef_id: UUID
    title: str
    description: str | None
    ingredients: list[str]
    instructions: list[str]
    prep_time: int | None
    cook_time: int | None
    servings: int | None
    difficulty: Difficulty | None
    category: str | None
    tags: list[str]
    image_url: str | None
    featured: bool
    rating: float
    total_reviews: int
    created_at: datetime | None
    updated_at: datetime | None
    chef: ChefSummary | None = None


@dataclass(frozen=True)
class RecipeDraft:
    """Fields supplied by a chef when publishing a recipe."""

    title: str
    ingredients: list[str]
    instructions: list[str]
    tags: list[str]
    difficulty: str
    category: str
    description: str | None = None
    prep_time: int | None = None
    cook_time: int | None = None
    servings: int | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class Registration:
    """Sign-up form contents."""

    first_name: str
    last_name: str
    email: str
    password: str
    confirm_password: str


@dataclass(frozen=True)
class GlobalSearchResult:
    """Recipes and profiles matching a free-text query."""

    recipes: list[Recipe] = field(default_factory=list)
    profiles: list[Profile] = field(default_factory=list)
