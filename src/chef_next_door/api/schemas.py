"""Pydantic request models for the HTTP API."""

from pydantic import BaseModel, Field


class SignInRequest(BaseModel):
    """Email/password sign-in payload."""

    email: str
    password: str


class SignUpRequest(BaseModel):
    """Registration form payload."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""


class ProfileUpdateRequest(BaseModel):
    """Partial profile edit; only fields that are sent get written."""

    first_name: str | None = None
    last_name: str | None = None
    avatar_url: str | None = None
    bio: str | None = None


class RecipeCreateRequest(BaseModel):
    """New recipe payload. Completeness is checked by form validation."""

    title: str = ""
    description: str | None = None
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    difficulty: str = ""
    category: str = ""
    prep_time: int | None = None
    cook_time: int | None = None
    servings: int | None = None
    image_url: str | None = None


class RecipeUpdateRequest(BaseModel):
    """Partial recipe edit."""

    title: str | None = None
    description: str | None = None
    ingredients: list[str] | None = None
    instructions: list[str] | None = None
    tags: list[str] | None = None
    difficulty: str | None = None
    category: str | None = None
    prep_time: int | None = None
    cook_time: int | None = None
    servings: int | None = None
    image_url: str | None = None


class RatingRequest(BaseModel):
    """Star rating for a recipe."""

    rating: int
