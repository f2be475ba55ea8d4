"""Extract approved licenses from the FSF license list page."""

from __future__ import annotations

from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from bs4 import BeautifulSoup, Tag

from licenseaudit.domain.errors import ScrapeError
from licenseaudit.domain.model import AuthoritySource
from licenseaudit.domain.normalize import normalize

if TYPE_CHECKING:
    from collections.abc import Mapping

log = getLogger(__name__)

# The FSF anchors Clear BSD as "clearbsd" rather than its SPDX id or name.
# One explicit entry per known rename; there is no fuzzy matching here.
ALIASES: Final[Mapping[str, str]] = MappingProxyType({"clearbsd": "bsd-3-clause-clear"})


def parse_approved(html: str | bytes, *, approved_class: str) -> dict[str, str]:
    """Return normalized anchor id -> license name for every approved ``<dt>``.

    Within each ``<dt>`` under an element with ``approved_class``, the first anchor
    that has both an ``id`` and non-empty text names the license. Anchors missing
    either are incidental markup and skipped.
    """

    soup = BeautifulSoup(html, "html.parser")
    if soup.find() is None:
        raise ScrapeError("response contains no HTML elements", source=AuthoritySource.FSF)

    approved: dict[str, str] = {}
    for term in soup.select(f".{approved_class} dt"):
        anchor = _license_anchor(term)
        if anchor is None:
            continue
        key = normalize(str(anchor["id"]))
        approved.setdefault(key, anchor.get_text().strip())

    if not approved:
        raise ScrapeError(
            f"no anchors found under '.{approved_class} dt'; the page layout may have changed",
            source=AuthoritySource.FSF,
        )

    for source_key, corpus_key in ALIASES.items():
        if source_key in approved:
            approved[corpus_key] = approved[source_key]

    log.debug("FSF approved list: %d entries", len(approved))
    return approved


def _license_anchor(term: Tag) -> Tag | None:
    for anchor in term.find_all("a"):
        if not isinstance(anchor, Tag):
            continue
        if not anchor.get("id") or not anchor.get_text().strip():
            continue
        return anchor
    return None
