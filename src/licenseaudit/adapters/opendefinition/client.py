"""Open Definition license group client."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from licenseaudit.adapters._http import decode_json_object, get_response
from licenseaudit.adapters.http_resilience import default_client_factory
from licenseaudit.config.authorities import get_open_definition_config
from licenseaudit.domain.errors import ParseError
from licenseaudit.domain.model import AuthoritySource
from licenseaudit.domain.normalize import normalize

from .schema import OpenDefinitionGroup

if TYPE_CHECKING:
    from licenseaudit.adapters.http_resilience import ClientFactory
    from licenseaudit.config.authorities import OpenDefinitionConfig

log = getLogger(__name__)


class OpenDefinitionClient:
    """Fetches the Open Definition conformant license group."""

    def __init__(
        self,
        *,
        config: OpenDefinitionConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or get_open_definition_config()
        self._client_factory = client_factory or default_client_factory

    def fetch_open_definition(self) -> dict[str, str]:
        group = asyncio.run(self._fetch_group_async())
        licenses: dict[str, str] = {}
        for license_id, item in group.root.items():
            key = normalize(license_id)
            if not key:
                log.warning("Open Definition entry with blank id skipped: %r", item.title)
                continue
            previous = licenses.setdefault(key, item.title)
            if previous != item.title:
                log.warning(
                    "Open Definition id %r appears with titles %r and %r; keeping the first",
                    key,
                    previous,
                    item.title,
                )
        if not licenses:
            log.error("Open Definition group lists no licenses")
            raise ParseError("group lists no licenses", source=AuthoritySource.OPEN_DEFINITION)
        log.info("Open Definition group: %d licenses", len(licenses))
        return licenses

    async def _fetch_group_async(self) -> OpenDefinitionGroup:
        async with self._client_factory(self._config.resilience) as client:
            response = await get_response(
                client, self._config.url, source=AuthoritySource.OPEN_DEFINITION
            )

        payload = decode_json_object(response, source=AuthoritySource.OPEN_DEFINITION)
        try:
            return OpenDefinitionGroup.model_validate(payload)
        except ValidationError as exc:
            log.error("Open Definition payload failed validation: %s", exc)
            raise ParseError(str(exc), source=AuthoritySource.OPEN_DEFINITION) from exc
