"""Keyed reads with request deduplication, retry and revalidation.

A ``Subscription`` binds one cache key to one fetcher and exposes the
``data`` / ``error`` / ``is_loading`` triple. A ``None`` key suspends the
subscription: nothing is fetched until a real key is set.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, replace

from chef_next_door.config import Settings
from chef_next_door.domain.cache import CacheAction, CacheCommand, MutationResult
from chef_next_door.domain.errors import ErrorKind, error_kind
from chef_next_door.services.cache import Cache, InMemoryCache
from chef_next_door.services.cache_keys import in_namespace

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[object]]
ErrorHook = Callable[[BaseException, str], None]


@dataclass(frozen=True)
class RetryPolicy:
    """Fixed-delay retry for failed reads."""

    max_retries: int = 3
    delay_seconds: float = 1.0
    no_retry_on: frozenset[ErrorKind] = frozenset(
        {ErrorKind.NOT_AUTHENTICATED, ErrorKind.NOT_FOUND}
    )

    def should_retry(self, error: BaseException, retry_count: int) -> bool:
        """Return True if a read that failed ``retry_count`` times may go again."""
        if error_kind(error) in self.no_retry_on:
            return False
        return retry_count < self.max_retries

    def delay_for(self, retry_count: int) -> float:
        return self.delay_seconds


@dataclass(frozen=True)
class RevalidationPolicy:
    """When subscribed keys are fetched again."""

    on_mount: bool = True
    on_reconnect: bool = True
    on_focus: bool = False
    dedupe_interval: float = 2.0


@dataclass(frozen=True)
class QueryState:
    """Observable state of a subscription."""

    data: object | None = None
    error: BaseException | None = None
    is_loading: bool = False
    has_data: bool = False
    suspended: bool = False

    @property
    def status(self) -> str:
        if self.suspended:
            return "suspended"
        if self.error is not None:
            return "error"
        if self.has_data:
            return "success"
        if self.is_loading:
            return "loading"
        return "idle"


@dataclass
class GlobalErrorHandler:
    """Terminal read-failure hook shared by every subscription."""

    login_path: str
    redirect: Callable[[str], None] | None = None

    def __call__(self, error: BaseException, key: str) -> None:
        logger.error("Query failed for %s: %s", key, error)
        if error_kind(error) is ErrorKind.NOT_AUTHENTICATED and self.redirect:
            self.redirect(self.login_path)


class Subscription:
    """A live binding between a cache key and a fetcher."""

    def __init__(self, client: "QueryClient", key: str | None, fetcher: Fetcher):
        self._client = client
        self._fetcher = fetcher
        self._generation = 0
        self.key = key
        self.closed = False
        self.state = QueryState()
        self._seed_from_cache()

    async def refresh(self, *, force: bool = False) -> QueryState:
        """Fetch through the client and update the state."""
        if self.key is None or self.closed:
            return self.state
        key = self.key
        generation = self._generation
        self.state = replace(self.state, is_loading=True)
        try:
            value = await self._client.fetch(key, self._fetcher, force=force)
        except Exception as error:  # noqa: BLE001
            if generation == self._generation:
                self.state = replace(self.state, error=error, is_loading=False)
            return self.state
        if generation == self._generation:
            self.state = QueryState(data=value, has_data=True)
        return self.state

    async def set_key(
        self, key: str | None, fetcher: Fetcher | None = None
    ) -> QueryState:
        """Rebind to a new key; responses still in flight for the old key are dropped."""
        self._generation += 1
        self.key = key
        if fetcher is not None:
            self._fetcher = fetcher
        self._seed_from_cache()
        await self.mount()
        return self.state

    async def mount(self) -> QueryState:
        if self.key is None:
            return self.state
        if self._client.revalidation.on_mount or not self.state.has_data:
            return await self.refresh()
        return self.state

    def close(self) -> None:
        """Stop receiving updates."""
        self._generation += 1
        self.closed = True
        self._client._unsubscribe(self)

    def _replace_data(self, value: object) -> None:
        self._generation += 1
        self.state = QueryState(data=value, has_data=True)

    def _reset(self) -> None:
        self._generation += 1
        self.state = QueryState()

    def _supersede(self) -> None:
        self._generation += 1

    def _seed_from_cache(self) -> None:
        if self.key is None:
            self.state = QueryState(suspended=True)
            return
        entry = self._client.cache.get(self.key)
        if entry is None:
            self.state = QueryState()
        else:
            self.state = QueryState(data=entry.value, has_data=True)


class QueryClient:
    """Cache-backed read layer and the single place cache commands are applied."""

    def __init__(  # noqa: PLR0913
        self,
        cache: Cache | None = None,
        retry_policy: RetryPolicy | None = None,
        revalidation: RevalidationPolicy | None = None,
        on_error: ErrorHook | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.cache = cache if cache is not None else InMemoryCache(clock)
        self.retry_policy = retry_policy or RetryPolicy()
        self.revalidation = revalidation or RevalidationPolicy()
        self._on_error = on_error
        self._clock = clock
        self._sleep = sleep
        self._inflight: dict[str, asyncio.Future] = {}
        self._generations: dict[str, int] = {}
        self._subscriptions: list[Subscription] = []

    @classmethod
    def from_settings(
        cls, settings: Settings, on_error: ErrorHook | None = None
    ) -> "QueryClient":
        """Build a client with policies taken from settings."""
        return cls(
            retry_policy=RetryPolicy(
                max_retries=settings.error_retry_count,
                delay_seconds=settings.error_retry_interval_seconds,
            ),
            revalidation=RevalidationPolicy(
                on_mount=settings.revalidate_on_mount,
                on_reconnect=settings.revalidate_on_reconnect,
                on_focus=settings.revalidate_on_focus,
                dedupe_interval=settings.dedupe_interval_seconds,
            ),
            on_error=on_error,
        )

    async def fetch(self, key: str, fetcher: Fetcher, *, force: bool = False) -> object:
        """Return the value for a key, sharing any request already in flight.

        A fresh entry younger than the dedupe interval is returned without a
        fetch unless ``force`` is set. Stale entries always refetch.
        """
        inflight = self._inflight.get(key)
        if inflight is not None:
            return await asyncio.shield(inflight)
        entry = self.cache.get(key)
        if (
            not force
            and entry is not None
            and not entry.stale
            and self._clock() - entry.fetched_at < self.revalidation.dedupe_interval
        ):
            return entry.value
        task = asyncio.ensure_future(self._load(key, fetcher))
        self._inflight[key] = task
        task.add_done_callback(lambda done: self._clear_inflight(key, done))
        return await asyncio.shield(task)

    async def subscribe(self, key: str | None, fetcher: Fetcher) -> Subscription:
        """Register a subscription and run its mount-time fetch."""
        subscription = Subscription(self, key, fetcher)
        self._subscriptions.append(subscription)
        await subscription.mount()
        return subscription

    async def reconnect(self) -> None:
        """Network came back: refetch every active key."""
        if self.revalidation.on_reconnect:
            await self._revalidate(sub.key for sub in self._subscriptions)

    async def focus(self) -> None:
        """Window regained focus; refetches only if the policy asks for it."""
        if self.revalidation.on_focus:
            await self._revalidate(sub.key for sub in self._subscriptions)

    async def apply(self, commands: Iterable[CacheCommand]) -> None:
        """Apply cache commands, then refetch subscribed keys that went stale."""
        to_revalidate: set[str] = set()
        for command in commands:
            for key in self._resolve(command):
                self._discard_inflight(key)
                if command.action is CacheAction.REPLACE:
                    self.cache.set(key, command.value)
                    for subscription in self._subscribers(key):
                        subscription._replace_data(command.value)
                elif command.action is CacheAction.INVALIDATE:
                    self.cache.invalidate(key)
                    for subscription in self._subscribers(key):
                        subscription._supersede()
                    to_revalidate.add(key)
                elif command.action is CacheAction.PURGE:
                    self.cache.purge(key)
                    for subscription in self._subscribers(key):
                        subscription._reset()
                    to_revalidate.add(key)
        logger.debug("Applied cache commands; revalidating %s", sorted(to_revalidate))
        await self._revalidate(to_revalidate)

    async def commit(self, result: MutationResult) -> object | None:
        """Apply a confirmed mutation's cache commands and return its value."""
        await self.apply(result.commands)
        return result.value

    async def _load(self, key: str, fetcher: Fetcher) -> object:
        generation = self._generations.get(key, 0)
        retry_count = 0
        while True:
            try:
                value = await fetcher()
            except Exception as error:
                if not self.retry_policy.should_retry(error, retry_count):
                    self._report(error, key)
                    raise
                retry_count += 1
                logger.warning(
                    "Retrying %s (attempt %d) after error: %s", key, retry_count, error
                )
                await self._sleep(self.retry_policy.delay_for(retry_count))
                continue
            if self._generations.get(key, 0) == generation:
                self.cache.set(key, value)
            return value

    def _report(self, error: BaseException, key: str) -> None:
        if self._on_error is None:
            logger.error("Query failed for %s: %s", key, error)
            return
        self._on_error(error, key)

    def _clear_inflight(self, key: str, done: asyncio.Future) -> None:
        if self._inflight.get(key) is done:
            del self._inflight[key]
        if not done.cancelled():
            done.exception()

    def _discard_inflight(self, key: str) -> None:
        self._generations[key] = self._generations.get(key, 0) + 1
        self._inflight.pop(key, None)

    def _resolve(self, command: CacheCommand) -> list[str]:
        if not command.match_namespace:
            return [command.key]
        known = set(self.cache.keys())
        known.update(sub.key for sub in self._subscriptions if sub.key is not None)
        return sorted(key for key in known if in_namespace(key, command.key))

    def _subscribers(self, key: str) -> list[Subscription]:
        return [sub for sub in self._subscriptions if sub.key == key]

    async def _revalidate(self, keys: Iterable[str | None]) -> None:
        wanted = {key for key in keys if key is not None}
        refreshes = [
            sub.refresh(force=True) for sub in self._subscriptions if sub.key in wanted
        ]
        if refreshes:
            await asyncio.gather(*refreshes)

    def _unsubscribe(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
