"""Ports the domain depends on; adapters provide the implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .catalog import LicenseCatalog


@runtime_checkable
class CatalogClient(Protocol):
    """Standards catalog: every known identifier and its properties."""

    def fetch_catalog(self) -> LicenseCatalog: ...


@runtime_checkable
class ApprovalListClient(Protocol):
    """Scraped approval list: normalized key -> display name."""

    def fetch_approved(self) -> dict[str, str]: ...


@runtime_checkable
class OpenDefinitionClient(Protocol):
    """Second catalog: normalized key -> title."""

    def fetch_open_definition(self) -> dict[str, str]: ...


@runtime_checkable
class ContentSource(Protocol):
    """Content-loading collaborator that owns the corpus on disk.

    ``documents`` yields one plain mapping per license document, including a
    ``slug`` key. ``data`` returns one named schema section (``rules``, ``fields``, ``meta``)
    or ``None`` when the corpus has no such section.
    """

    def documents(self) -> Iterable[Mapping[str, object]]: ...

    def data(self, section: str) -> object: ...


__all__ = [
    "ApprovalListClient",
    "CatalogClient",
    "ContentSource",
    "OpenDefinitionClient",
]
