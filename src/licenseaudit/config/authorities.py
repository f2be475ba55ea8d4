"""Endpoints and HTTP settings for the licensing authorities."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .env import optional_url
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig

DEFAULT_SPDX_URL = "https://spdx.org/licenses/licenses.json"
DEFAULT_FSF_URL = "https://www.gnu.org/licenses/license-list.en.html"
DEFAULT_OD_URL = "http://licenses.opendefinition.org/licenses/groups/od.json"

# FSF marks free licenses compatible with the GPL and otherwise in green.
DEFAULT_FSF_APPROVED_CLASS = "green"

USER_AGENT = "licenseaudit (license corpus verification)"

# Path of an optional sqlite HTTP cache shared by the authority clients.
HTTP_CACHE_ENV = "LICENSEAUDIT_HTTP_CACHE"


def http_cache_config() -> CacheConfig | None:
    """sqlite cache at ``$LICENSEAUDIT_HTTP_CACHE``, or no cache when unset."""

    path = os.getenv(HTTP_CACHE_ENV, "").strip()
    if not path:
        return None
    return CacheConfig(backend="sqlite", sqlite_path=path)


def _resilience(name: str, *, accept: str) -> ResilienceConfig:
    return ResilienceConfig(
        name=name,
        ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
        cache=http_cache_config(),
        user_agent=USER_AGENT,
        accept=accept,
    )


@dataclass(frozen=True, slots=True)
class SpdxConfig:
    url: str
    resilience: ResilienceConfig


@dataclass(frozen=True, slots=True)
class FsfConfig:
    url: str
    resilience: ResilienceConfig
    approved_class: str = DEFAULT_FSF_APPROVED_CLASS


@dataclass(frozen=True, slots=True)
class OpenDefinitionConfig:
    url: str
    resilience: ResilienceConfig


def get_spdx_config(*, resilience: ResilienceConfig | None = None) -> SpdxConfig:
    return SpdxConfig(
        url=optional_url("LICENSEAUDIT_SPDX_URL", DEFAULT_SPDX_URL),
        resilience=resilience or _resilience("spdx", accept="application/json"),
    )


def get_fsf_config(*, resilience: ResilienceConfig | None = None) -> FsfConfig:
    return FsfConfig(
        url=optional_url("LICENSEAUDIT_FSF_URL", DEFAULT_FSF_URL),
        resilience=resilience or _resilience("fsf", accept="text/html"),
    )


def get_open_definition_config(
    *, resilience: ResilienceConfig | None = None
) -> OpenDefinitionConfig:
    return OpenDefinitionConfig(
        url=optional_url("LICENSEAUDIT_OD_URL", DEFAULT_OD_URL),
        resilience=resilience or _resilience("opendefinition", accept="application/json"),
    )
