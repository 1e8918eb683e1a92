"""Client-side form checks run before any network call."""

import re

from chef_next_door.domain.errors import FormValidationError
from chef_next_door.domain.models import Difficulty, RecipeDraft, Registration

_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
_MIN_NAME_LENGTH = 2
_MIN_PASSWORD_LENGTH = 8
_MIN_RATING = 1
_MAX_RATING = 5

PROFILE_FIELDS = frozenset({"first_name", "last_name", "avatar_url", "bio"})
RECIPE_FIELDS = frozenset(
    {
        "title",
        "description",
        "ingredients",
        "instructions",
        "prep_time",
        "cook_time",
        "servings",
        "difficulty",
        "category",
        "tags",
        "image_url",
    }
)
_DIFFICULTIES = {level.value for level in Difficulty}


def normalize_tag_input(tags: list[str]) -> list[str]:
    """Trim tags and drop blanks and duplicates, keeping entry order."""
    seen: list[str] = []
    for tag in tags:
        cleaned = tag.strip()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


def validate_recipe_draft(draft: RecipeDraft) -> None:
    """Validate a new recipe; every failing field is reported at once."""
    errors = _recipe_field_errors(
        {
            "title": draft.title,
            "description": draft.description,
            "ingredients": draft.ingredients,
            "instructions": draft.instructions,
            "prep_time": draft.prep_time,
            "cook_time": draft.cook_time,
            "servings": draft.servings,
            "difficulty": draft.difficulty,
            "category": draft.category,
            "tags": draft.tags,
            "image_url": draft.image_url,
        },
        partial=False,
    )
    if errors:
        raise FormValidationError(errors)


def validate_recipe_update(fields: dict[str, object]) -> None:
    """Validate only the fields supplied for a partial update."""
    errors = {
        name: "Field cannot be updated"
        for name in fields
        if name not in RECIPE_FIELDS
    }
    if not fields:
        errors["fields"] = "Nothing to update"
    errors.update(_recipe_field_errors(fields, partial=True))
    if errors:
        raise FormValidationError(errors)


def validate_profile_update(fields: dict[str, object]) -> None:
    """Validate a partial profile edit."""
    errors = {
        name: "Field cannot be updated"
        for name in fields
        if name not in PROFILE_FIELDS
    }
    if not fields:
        errors["fields"] = "Nothing to update"
    for name in ("first_name", "last_name"):
        if name in fields:
            message = _name_error(fields[name], name.replace("_", " ").capitalize())
            if message:
                errors[name] = message
    if errors:
        raise FormValidationError(errors)


def validate_registration(registration: Registration) -> None:
    """Validate the sign-up form."""
    errors: dict[str, str] = {}
    for name, label in (("first_name", "First name"), ("last_name", "Last name")):
        message = _name_error(getattr(registration, name), label)
        if message:
            errors[name] = message

    if not registration.email:
        errors["email"] = "Email is required"
    elif not _EMAIL_PATTERN.search(registration.email):
        errors["email"] = "Please enter a valid email address"

    password = registration.password
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < _MIN_PASSWORD_LENGTH:
        errors["password"] = "Password must be at least 8 characters"
    elif not (
        re.search(r"[a-z]", password)
        and re.search(r"[A-Z]", password)
        and re.search(r"\d", password)
    ):
        errors["password"] = (
            "Password must contain at least one uppercase letter, "
            "one lowercase letter, and one number"
        )

    if not registration.confirm_password:
        errors["confirm_password"] = "Please confirm your password"
    elif registration.confirm_password != password:
        errors["confirm_password"] = "Passwords do not match"

    if errors:
        raise FormValidationError(errors)


def validate_rating(rating: object) -> int:
    """Return the rating if it is a whole number from 1 to 5."""
    if (
        isinstance(rating, bool)
        or not isinstance(rating, int)
        or not _MIN_RATING <= rating <= _MAX_RATING
    ):
        raise FormValidationError({"rating": "Rating must be a whole number 1-5"})
    return rating


def _recipe_field_errors(  # noqa: PLR0912
    fields: dict[str, object], *, partial: bool
) -> dict[str, str]:
    errors: dict[str, str] = {}

    def present(name: str) -> bool:
        return not partial or name in fields

    if present("title") and not _non_blank(fields.get("title")):
        errors["title"] = "Title is required"
    if present("category") and not _non_blank(fields.get("category")):
        errors["category"] = "Category is required"
    if present("difficulty"):
        difficulty = fields.get("difficulty")
        if not _non_blank(difficulty):
            errors["difficulty"] = "Difficulty is required"
        elif difficulty not in _DIFFICULTIES:
            errors["difficulty"] = "Difficulty must be easy, medium or hard"
    for name, label in (("ingredients", "ingredient"), ("instructions", "instruction")):
        if present(name) and not _all_non_blank(fields.get(name)):
            errors[name] = (
                f"Please include at least one {label} and make sure none are empty"
            )
    if present("tags"):
        tags = fields.get("tags")
        if not isinstance(tags, list) or not normalize_tag_input(
            [str(tag) for tag in tags]
        ):
            errors["tags"] = "Please add at least one tag"
    for name in ("prep_time", "cook_time"):
        value = fields.get(name)
        if value is not None and not _is_int_at_least(value, 0):
            errors[name] = "Must be a whole number of minutes"
    servings = fields.get("servings")
    if servings is not None and not _is_int_at_least(servings, 1):
        errors["servings"] = "Servings must be a positive whole number"
    return errors


def _name_error(value: object, label: str) -> str | None:
    if not _non_blank(value):
        return f"{label} is required"
    if len(str(value).strip()) < _MIN_NAME_LENGTH:
        return f"{label} must be at least 2 characters"
    return None


def _non_blank(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _all_non_blank(values: object) -> bool:
    if not isinstance(values, list) or not values:
        return False
    return all(_non_blank(value) for value in values)


def _is_int_at_least(value: object, minimum: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= minimum
