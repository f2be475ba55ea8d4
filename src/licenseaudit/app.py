"""Application wiring for a verification pass."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from licenseaudit.adapters.fsf import FsfClient
from licenseaudit.adapters.jekyll import JekyllContentSource
from licenseaudit.adapters.opendefinition import OpenDefinitionClient
from licenseaudit.adapters.spdx import SpdxClient
from licenseaudit.config.corpus import get_corpus_config
from licenseaudit.domain.cache import AuthorityCache
from licenseaudit.domain.corpus import CorpusLoader
from licenseaudit.domain.model import AuthoritySource
from licenseaudit.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    from licenseaudit.domain.model import VerificationReport
    from licenseaudit.domain.ports import (
        ApprovalListClient,
        CatalogClient,
        ContentSource,
        OpenDefinitionClient as OpenDefinitionPort,
    )

log = getLogger(__name__)


def build_cache(
    *,
    catalog: CatalogClient | None = None,
    approval_list: ApprovalListClient | None = None,
    open_definition: OpenDefinitionPort | None = None,
) -> AuthorityCache:
    spdx = catalog or SpdxClient()
    fsf = approval_list or FsfClient()
    od = open_definition or OpenDefinitionClient()
    return AuthorityCache(
        {
            AuthoritySource.SPDX: spdx.fetch_catalog,
            AuthoritySource.FSF: fsf.fetch_approved,
            AuthoritySource.OPEN_DEFINITION: od.fetch_open_definition,
        }
    )


def build_engine(
    *,
    content: ContentSource | None = None,
    cache: AuthorityCache | None = None,
) -> ReconciliationEngine:
    """Build an engine from configuration; pass ``content``/``cache`` to override."""

    source = content or JekyllContentSource(get_corpus_config())
    return ReconciliationEngine(corpus=CorpusLoader(source), cache=cache or build_cache())


def verify_corpus(engine: ReconciliationEngine | None = None) -> VerificationReport:
    """Run one verification pass and log each discrepancy."""

    active_engine = engine or build_engine()
    log.info("Starting license verification pass")
    report = active_engine.verify()
    for discrepancy in report.discrepancies:
        log.warning("%s", discrepancy)
    log.info(
        "Finished license verification: checked=%d, discrepancies=%d",
        report.checked,
        len(report.discrepancies),
    )
    return report
