"""HTTP settings shared by the authority clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import httpx

TRANSIENT_STATUSES = frozenset({429, 500, 502, 503, 504})
TRANSIENT_ERRORS: tuple[type[httpx.HTTPError], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """How often a GET against an authority is repeated before the pass fails."""

    attempts: int = 3
    backoff_factor: float = 0.5
    max_backoff_wait: float = 30.0
    status_forcelist: frozenset[int] = TRANSIENT_STATUSES
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = TRANSIENT_ERRORS


# Authority fetches fail the pass on the first transport error.
NO_RETRY = RetryPolicy(attempts=0)


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class CacheConfig:
    """HTTP response cache kept by hishel; ``sqlite`` persists across runs."""

    enabled: bool = True
    backend: Literal["sqlite", "memory"] = "memory"
    sqlite_path: str | None = None
    default_ttl_seconds: float | None = None
    refresh_ttl_on_access: bool = True


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    """Per-authority client settings; ``name`` prefixes the client's log lines."""

    name: str
    timeout_seconds: float = 30.0
    retry: RetryPolicy = NO_RETRY
    ratelimit: RateLimit | None = None
    cache: CacheConfig | None = None
    user_agent: str | None = None
    accept: str | None = None
