"""Shared request helper for authority clients."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from licenseaudit.domain.errors import FetchError, ParseError

if TYPE_CHECKING:
    from licenseaudit.domain.model import AuthoritySource

    from .http_resilience import ResilientClient

log = getLogger(__name__)


async def get_response(
    client: ResilientClient,
    url: str,
    *,
    source: AuthoritySource,
) -> httpx.Response:
    """GET ``url``; any transport failure or non-2xx status becomes a ``FetchError``."""

    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        log.error("%s fetch failed for %s: %s", source, url, exc)
        raise FetchError(str(exc) or type(exc).__name__, source=source) from exc
    log.info("%s fetched %s (%d bytes)", source, url, len(response.content))
    return response


def decode_json_object(response: httpx.Response, *, source: AuthoritySource) -> dict[str, object]:
    try:
        payload = response.json()
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        log.error("%s returned a body that is not JSON: %s", source, exc)
        raise ParseError(f"response is not valid JSON: {exc}", source=source) from exc
    if not isinstance(payload, dict):
        raise ParseError(
            f"expected a JSON object, got {type(payload).__name__}", source=source
        )
    return payload
