"""In-memory view of the SPDX license list."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from .normalize import normalize

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    license_id: str
    name: str
    is_osi_approved: bool = False
    properties: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))


class LicenseCatalog:
    """Licenses keyed by ``licenseId`` exactly as the catalog spells it.

    This is the only place that answers "does this identifier exist".
    """

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        self._entries: dict[str, CatalogEntry] = {}
        for entry in entries:
            self._entries[entry.license_id] = entry
        self._by_key = {normalize(license_id): entry for license_id, entry in self._entries.items()}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.contains(identifier)

    @property
    def entries(self) -> Mapping[str, CatalogEntry]:
        return MappingProxyType(self._entries)

    def all_ids(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def find(self, identifier: str) -> CatalogEntry | None:
        return self._entries.get(identifier)

    def contains(self, identifier: str) -> bool:
        return normalize(identifier) in self._by_key

    def osi_approved(self) -> dict[str, str]:
        return {
            normalize(license_id): entry.name
            for license_id, entry in self._entries.items()
            if entry.is_osi_approved
        }
