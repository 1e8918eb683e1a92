"""Query option value objects used for filtering and cache keys."""

from dataclasses import dataclass


def normalize_tags(tags: object) -> tuple[str, ...]:
    """Trim, de-duplicate and sort tag filters; blank entries are dropped."""
    if not tags:
        return ()
    if isinstance(tags, str):
        tags = tags.split(",")
    cleaned = {str(tag).strip() for tag in tags}
    return tuple(sorted(tag for tag in cleaned if tag))


@dataclass(frozen=True)
class RecipeListOptions:
    """Filters for the community recipe feed.

    Tags are matched by overlap, so their order never matters; they are stored
    sorted to keep equality (and therefore cache keys) order-independent.
    """

    limit: int | None = None
    offset: int | None = None
    featured: bool | None = None
    difficulty: str | None = None
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", normalize_tags(self.tags))
        object.__setattr__(self, "difficulty", self.difficulty or None)

    def to_params(self) -> dict[str, object]:
        """Return only the options that affect the result set."""
        params: dict[str, object] = {}
        if self.limit is not None:
            params["limit"] = self.limit
        if self.offset is not None:
            params["offset"] = self.offset
        if self.featured is not None:
            params["featured"] = self.featured
        if self.difficulty:
            params["difficulty"] = self.difficulty
        if self.tags:
            params["tags"] = list(self.tags)
        return params


@dataclass(frozen=True)
class RecipeSearchOptions:
    """Filters applied on top of a text search."""

    limit: int | None = None
    difficulty: str | None = None
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", normalize_tags(self.tags))
        object.__setattr__(self, "difficulty", self.difficulty or None)

    def to_params(self) -> dict[str, object]:
        """Return only the options that affect the result set."""
        params: dict[str, object] = {}
        if self.limit is not None:
            params["limit"] = self.limit
        if self.difficulty:
            params["difficulty"] = self.difficulty
        if self.tags:
            params["tags"] = list(self.tags)
        return params


@dataclass(frozen=True)
class GlobalSearchOptions:
    """Which result kinds a global search includes."""

    include_recipes: bool = True
    include_profiles: bool = True
    limit: int | None = None

    def to_params(self) -> dict[str, object]:
        params: dict[str, object] = {
            "include_recipes": self.include_recipes,
            "include_profiles": self.include_profiles,
        }
        if self.limit is not None:
            params["limit"] = self.limit
        return params
