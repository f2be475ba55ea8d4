"""Translate SPDX payloads into the domain catalog."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from licenseaudit.domain.catalog import CatalogEntry, LicenseCatalog

if TYPE_CHECKING:
    from .schema import SpdxLicense, SpdxLicenseList


def translate_license(payload: SpdxLicense) -> CatalogEntry:
    return CatalogEntry(
        license_id=payload.license_id,
        name=payload.name,
        is_osi_approved=payload.is_osi_approved,
        properties=MappingProxyType(payload.model_dump(by_alias=True, exclude_none=True)),
    )


def translate_license_list(payload: SpdxLicenseList) -> LicenseCatalog:
    return LicenseCatalog(translate_license(item) for item in payload.licenses)
