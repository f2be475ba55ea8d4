"""SPDX license list client."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from licenseaudit.adapters._http import decode_json_object, get_response
from licenseaudit.adapters.http_resilience import default_client_factory
from licenseaudit.config.authorities import get_spdx_config
from licenseaudit.domain.errors import ParseError
from licenseaudit.domain.model import AuthoritySource

from .schema import SpdxLicenseList
from .translator import translate_license_list

if TYPE_CHECKING:
    from licenseaudit.adapters.http_resilience import ClientFactory
    from licenseaudit.config.authorities import SpdxConfig
    from licenseaudit.domain.catalog import LicenseCatalog

log = getLogger(__name__)


class SpdxClient:
    """Fetches the SPDX license list: the canonical set of license identifiers."""

    def __init__(
        self,
        *,
        config: SpdxConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or get_spdx_config()
        self._client_factory = client_factory or default_client_factory

    def fetch_catalog(self) -> LicenseCatalog:
        payload = asyncio.run(self._fetch_license_list_async())
        if not payload.licenses:
            log.error("SPDX license list is empty")
            raise ParseError("license list is empty", source=AuthoritySource.SPDX)
        catalog = translate_license_list(payload)
        log.info(
            "SPDX license list %s: %d licenses, %d OSI approved",
            payload.license_list_version or "(unversioned)",
            len(catalog),
            len(catalog.osi_approved()),
        )
        return catalog

    async def _fetch_license_list_async(self) -> SpdxLicenseList:
        async with self._client_factory(self._config.resilience) as client:
            response = await get_response(client, self._config.url, source=AuthoritySource.SPDX)

        payload = decode_json_object(response, source=AuthoritySource.SPDX)
        if "licenses" not in payload:
            raise ParseError("payload has no 'licenses' list", source=AuthoritySource.SPDX)
        try:
            return SpdxLicenseList.model_validate(payload)
        except ValidationError as exc:
            log.error("SPDX payload failed validation: %s", exc)
            raise ParseError(str(exc), source=AuthoritySource.SPDX) from exc
