"""FSF license list client."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from licenseaudit.adapters._http import get_response
from licenseaudit.adapters.http_resilience import default_client_factory
from licenseaudit.config.authorities import get_fsf_config
from licenseaudit.domain.model import AuthoritySource

from .scraper import parse_approved

if TYPE_CHECKING:
    from licenseaudit.adapters.http_resilience import ClientFactory
    from licenseaudit.config.authorities import FsfConfig

log = getLogger(__name__)


class FsfClient:
    """Scrapes the FSF's list of free software licenses."""

    def __init__(
        self,
        *,
        config: FsfConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or get_fsf_config()
        self._client_factory = client_factory or default_client_factory

    def fetch_approved(self) -> dict[str, str]:
        html = asyncio.run(self._fetch_page_async())
        approved = parse_approved(html, approved_class=self._config.approved_class)
        log.info("FSF license list: %d approved licenses", len(approved))
        return approved

    async def _fetch_page_async(self) -> bytes:
        async with self._client_factory(self._config.resilience) as client:
            response = await get_response(client, self._config.url, source=AuthoritySource.FSF)
        return response.content
