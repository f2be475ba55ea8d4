"""Open Definition license group schema."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, RootModel

from licenseaudit.adapters._schema import AuthorityBaseModel


class OpenDefinitionBaseModel(AuthorityBaseModel):
    source_label: ClassVar[str] = "Open Definition"
    _logged_extra_keys: ClassVar[set[str]] = set()


class OpenDefinitionLicense(OpenDefinitionBaseModel):
    id: str | None = None
    title: str = Field(min_length=1)
    url: str | None = None
    status: str | None = None
    maintainer: str | None = None
    domain_content: bool | None = None
    domain_data: bool | None = None
    domain_software: bool | None = None
    od_conformance: str | None = None
    osd_conformance: str | None = None
    is_generic: bool | None = None
    legacy_ids: list[str] = Field(default_factory=list)


class OpenDefinitionGroup(RootModel[dict[str, OpenDefinitionLicense]]):
    """Group document: license id -> license object."""
