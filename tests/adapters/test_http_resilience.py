"""Resilient client wiring over a stub transport."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import httpx
import pytest
from hishel import AsyncSqliteStorage
from hishel.httpx import AsyncCacheClient

from licenseaudit.adapters.http_resilience import (
    ResilientClient,
    build_cache_storage,
    build_retry,
)
from licenseaudit.config.http_resilience import (
    NO_RETRY,
    TRANSIENT_STATUSES,
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    RetryPolicy,
)
from tests.support.http import StubTransport, failing_responder, json_responder

if TYPE_CHECKING:
    from pathlib import Path

URL = "https://authority.test/licenses.json"


def _get(
    client_config: ResilienceConfig, transport: StubTransport, url: str = URL
) -> httpx.Response:
    async def run() -> httpx.Response:
        async with ResilientClient(client_config, transport=transport) as client:
            return await client.get(url)

    return asyncio.run(run())


def test_identity_headers_are_sent() -> None:
    transport = StubTransport(json_responder({"ok": True}))
    config = ResilienceConfig(
        name="example",
        user_agent="licenseaudit-tests",
        accept="application/json",
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
    )

    response = _get(config, transport)

    assert response.json() == {"ok": True}
    request = transport.requests[0]
    assert str(request.url) == URL
    assert request.method == "GET"
    assert request.headers["User-Agent"] == "licenseaudit-tests"
    assert request.headers["Accept"] == "application/json"


def test_redirects_are_followed() -> None:
    def respond(request: httpx.Request) -> httpx.Response:
        if request.url.scheme == "http":
            return httpx.Response(301, headers={"Location": URL})
        return httpx.Response(200, json={"ok": True})

    transport = StubTransport(respond)

    response = _get(
        ResilienceConfig(name="example"), transport, "http://authority.test/licenses.json"
    )

    assert response.status_code == 200
    assert transport.call_count == 2


def test_responses_are_logged_with_authority_name(caplog: pytest.LogCaptureFixture) -> None:
    transport = StubTransport(json_responder({}))

    with caplog.at_level(logging.DEBUG, logger="licenseaudit.adapters.http_resilience"):
        _get(ResilienceConfig(name="spdx"), transport)

    assert f"[spdx] GET {URL} -> 200" in caplog.messages


def test_no_retry_policy_surfaces_first_transport_error() -> None:
    transport = StubTransport(failing_responder)

    with pytest.raises(httpx.ConnectError):
        _get(ResilienceConfig(name="example"), transport)

    assert transport.call_count == 1


def test_error_status_is_returned_without_retry() -> None:
    transport = StubTransport(lambda _request: httpx.Response(503))

    response = _get(ResilienceConfig(name="example"), transport)

    assert response.status_code == 503
    assert transport.call_count == 1


def test_retry_policy_repeats_transient_status() -> None:
    transport = StubTransport(lambda _request: httpx.Response(503))
    config = ResilienceConfig(name="example", retry=RetryPolicy(attempts=2, backoff_factor=0.0))

    response = _get(config, transport)

    assert response.status_code == 503
    assert transport.call_count == 3


def test_resilience_config_defaults_to_no_retry() -> None:
    assert ResilienceConfig(name="example").retry == NO_RETRY
    assert NO_RETRY.attempts == 0


def test_build_retry_maps_policy_fields() -> None:
    retry = build_retry(RetryPolicy(attempts=2, backoff_factor=0.1))

    assert retry.total == 2
    assert retry.backoff_factor == 0.1
    assert set(RetryPolicy().status_forcelist) == set(TRANSIENT_STATUSES)


def test_cache_storage_is_off_unless_configured() -> None:
    assert build_cache_storage(None) is None
    assert build_cache_storage(CacheConfig(enabled=False)) is None


def test_memory_cache_storage_is_built() -> None:
    assert isinstance(build_cache_storage(CacheConfig()), AsyncSqliteStorage)


def test_sqlite_cache_needs_a_path() -> None:
    with pytest.raises(ValueError, match="sqlite_path"):
        build_cache_storage(CacheConfig(backend="sqlite"))


def test_cached_client_wraps_requests_in_hishel(tmp_path: Path) -> None:
    cache = CacheConfig(backend="sqlite", sqlite_path=str(tmp_path / "http.sqlite"))
    cached = ResilientClient(ResilienceConfig(name="example", cache=cache))
    plain = ResilientClient(ResilienceConfig(name="example"))

    assert isinstance(cached._client, AsyncCacheClient)  # noqa: SLF001
    assert not isinstance(plain._client, AsyncCacheClient)  # noqa: SLF001

    asyncio.run(cached.aclose())
    asyncio.run(plain.aclose())
