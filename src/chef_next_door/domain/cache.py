"""Cache commands emitted by mutation helpers."""

from dataclasses import dataclass
from enum import Enum


class CacheAction(Enum):
    """What to do with a cache entry after a confirmed write."""

    REPLACE = "replace"
    INVALIDATE = "invalidate"
    PURGE = "purge"


@dataclass(frozen=True)
class CacheCommand:
    """One cache instruction.

    With ``match_namespace`` set, ``key`` is a namespace and the command
    applies to the bare key and every ``<namespace>:<params>`` variant.
    """

    action: CacheAction
    key: str
    value: object | None = None
    match_namespace: bool = False


@dataclass(frozen=True)
class MutationResult:
    """Value produced by a write plus the cache commands it implies."""

    value: object | None
    commands: list[CacheCommand]


def replace(key: str, value: object) -> CacheCommand:
    return CacheCommand(action=CacheAction.REPLACE, key=key, value=value)


def invalidate(key: str) -> CacheCommand:
    return CacheCommand(action=CacheAction.INVALIDATE, key=key)


def invalidate_namespace(namespace: str) -> CacheCommand:
    return CacheCommand(
        action=CacheAction.INVALIDATE, key=namespace, match_namespace=True
    )


def purge(key: str) -> CacheCommand:
    return CacheCommand(action=CacheAction.PURGE, key=key)
