"""Rate-limited, retrying GET client used to download authority documents."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import TYPE_CHECKING, TypedDict

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

from licenseaudit.config.http_resilience import CacheConfig, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from types import TracebackType

__all__ = [
    "ClientFactory",
    "ResilientClient",
    "build_cache_storage",
    "build_retry",
    "default_client_factory",
]

log = getLogger(__name__)


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.attempts,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        allowed_methods=("GET",),
        status_forcelist=tuple(sorted(policy.status_forcelist)),
        retry_on_exceptions=policy.retry_on_exceptions,
    )


def build_cache_storage(config: CacheConfig | None) -> AsyncSqliteStorage | None:
    if config is None or not config.enabled:
        return None

    if config.backend == "sqlite":
        if not config.sqlite_path:
            msg = "sqlite HTTP cache needs a sqlite_path"
            raise ValueError(msg)
        database_path = config.sqlite_path
    elif config.backend == "memory":
        database_path = ":memory:"
    else:
        msg = f"Unsupported cache backend: {config.backend}"
        raise ValueError(msg)
    return AsyncSqliteStorage(
        database_path=database_path,
        default_ttl=config.default_ttl_seconds,
        refresh_ttl_on_access=config.refresh_ttl_on_access,
    )


class AsyncClientOptions(TypedDict, total=False):
    timeout: float
    transport: httpx.AsyncBaseTransport
    headers: dict[str, str]
    follow_redirects: bool
    event_hooks: dict[str, list[Callable[[httpx.Response], Awaitable[None]]]]


def _headers(config: ResilienceConfig) -> dict[str, str]:
    headers: dict[str, str] = {}
    if config.user_agent:
        headers["User-Agent"] = config.user_agent
    if config.accept:
        headers["Accept"] = config.accept
    return headers


class ResilientClient:
    """Async GET client with a retry transport, an optional rate limit and HTTP cache.

    ``transport`` replaces the network transport underneath the retry layer; tests
    pass an ``httpx.MockTransport`` here.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter: AsyncLimiter | None = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )
        client_kwargs: AsyncClientOptions = {
            "timeout": config.timeout_seconds,
            "transport": RetryTransport(transport=transport, retry=build_retry(config.retry)),
            "headers": _headers(config),
            "follow_redirects": True,
            "event_hooks": {"response": [self._log_response]},
        }
        storage = build_cache_storage(config.cache)
        if storage is not None:
            self._client: httpx.AsyncClient = AsyncCacheClient(**client_kwargs, storage=storage)
        else:
            self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str) -> httpx.Response:
        if self._limiter is None:
            return await self._client.get(url)
        async with self._limiter:
            return await self._client.get(url)

    async def _log_response(self, response: httpx.Response) -> None:
        log.debug(
            "[%s] %s %s -> %d",
            self.config.name,
            response.request.method,
            response.request.url,
            response.status_code,
        )


type ClientFactory = Callable[[ResilienceConfig], ResilientClient]


def default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)
