"""Shared helpers for the Supabase adapters."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from postgrest.exceptions import APIError

from chef_next_door.domain.errors import BackendError, ChefNextDoorError


@contextmanager
def backend_errors(operation: str) -> Iterator[None]:
    """Re-raise any data-layer failure as ``BackendError``."""
    try:
        yield
    except ChefNextDoorError:
        raise
    except APIError as error:
        raise BackendError(operation, error.message or str(error)) from error
    except Exception as error:
        raise BackendError(operation, str(error)) from error


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column; empty values become None."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


# Characters that delimit values inside a PostgREST ``or`` filter string.
_FILTER_SYNTAX = str.maketrans(
    {",": " ", "(": " ", ")": " ", "'": " ", '"': " ", "*": " "}
)


def ilike_pattern(term: str) -> str | None:
    """Build a ``%term%`` pattern safe to embed in an ``or`` filter string.

    Filter syntax is blanked out and LIKE wildcards are escaped so they match
    literally. Returns None when nothing searchable remains.
    """
    cleaned = term.translate(_FILTER_SYNTAX).strip()
    if not cleaned:
        return None
    escaped = cleaned.replace("\\", "\\\\").replace("%", r"\%").replace("_", r"\_")
    return f"%{escaped}%"
