"""Stub HTTP plumbing for authority client tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from licenseaudit.adapters.http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from licenseaudit.adapters.http_resilience import ClientFactory
    from licenseaudit.config.http_resilience import ResilienceConfig

type Responder = Callable[[httpx.Request], httpx.Response]


class StubTransport(httpx.MockTransport):
    """Mock transport that records every request it serves."""

    def __init__(self, responder: Responder) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)


def stub_client_factory(transport: StubTransport) -> ClientFactory:
    def factory(config: ResilienceConfig) -> ResilientClient:
        return ResilientClient(config, transport=transport)

    return factory


def file_responder(path: Path, *, content_type: str) -> Responder:
    body = path.read_bytes()

    def respond(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=body, headers={"Content-Type": content_type})

    return respond


def text_responder(
    body: str, *, status_code: int = 200, content_type: str = "text/html"
) -> Responder:
    def respond(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body, headers={"Content-Type": content_type})

    return respond


def json_responder(payload: object) -> Responder:
    def respond(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    return respond


def failing_responder(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)
