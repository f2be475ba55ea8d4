"""SPDX license list response schema."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from licenseaudit.adapters._schema import AuthorityBaseModel


class SpdxBaseModel(AuthorityBaseModel):
    source_label: ClassVar[str] = "SPDX"
    _logged_extra_keys: ClassVar[set[str]] = set()


class SpdxLicense(SpdxBaseModel):
    license_id: str = Field(alias="licenseId", min_length=1)
    name: str
    is_osi_approved: bool = Field(default=False, alias="isOsiApproved")
    is_fsf_libre: bool | None = Field(default=None, alias="isFsfLibre")
    is_deprecated: bool | None = Field(default=None, alias="isDeprecatedLicenseId")
    reference: str | None = None
    reference_number: int | None = Field(default=None, alias="referenceNumber")
    details_url: str | None = Field(default=None, alias="detailsUrl")
    see_also: list[str] = Field(default_factory=list, alias="seeAlso")


class SpdxLicenseList(SpdxBaseModel):
    license_list_version: str | None = Field(default=None, alias="licenseListVersion")
    release_date: str | None = Field(default=None, alias="releaseDate")
    licenses: list[SpdxLicense]
