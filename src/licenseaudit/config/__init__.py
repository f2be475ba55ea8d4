"""Application configuration helpers."""

from __future__ import annotations

from .authorities import (
    FsfConfig,
    OpenDefinitionConfig,
    SpdxConfig,
    get_fsf_config,
    get_open_definition_config,
    get_spdx_config,
)
from .corpus import CorpusConfig, get_corpus_config
from .env import optional_url, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import NO_RETRY, CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

__all__ = [
    "NO_RETRY",
    "CacheConfig",
    "ConfigurationError",
    "CorpusConfig",
    "FsfConfig",
    "MissingConfigurationError",
    "OpenDefinitionConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SpdxConfig",
    "get_corpus_config",
    "get_fsf_config",
    "get_open_definition_config",
    "get_spdx_config",
    "optional_url",
    "require_env_vars",
]
