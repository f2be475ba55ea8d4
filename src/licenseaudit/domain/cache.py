"""Run-scoped memoization of authority datasets."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .model import AuthoritySource

log = logging.getLogger(__name__)


class AuthorityCache:
    """One write-once slot per authority source.

    A fetcher runs at most once per cache. Failures propagate and leave the slot
    empty, so the next ``get_or_fetch`` retries instead of replaying the error.
    """

    def __init__(self, fetchers: Mapping[AuthoritySource, Callable[[], object]]) -> None:
        self._fetchers = MappingProxyType(dict(fetchers))
        self._slots: dict[AuthoritySource, object] = {}
        self._lock = threading.Lock()

    def get_or_fetch(self, source: AuthoritySource) -> object:
        fetcher = self._fetchers[source]
        with self._lock:
            if source in self._slots:
                return self._slots[source]
            log.debug("Fetching %s", source)
            value = fetcher()
            self._slots[source] = value
            return value

    def is_cached(self, source: AuthoritySource) -> bool:
        return source in self._slots

    def clear(self) -> None:
        with self._lock:
            self._slots.clear()
