"""Domain core: corpus records, authority datasets and their reconciliation."""

from __future__ import annotations

from .cache import AuthorityCache
from .catalog import CatalogEntry, LicenseCatalog
from .corpus import CorpusLoader
from .errors import (
    AuthorityError,
    CorpusError,
    FetchError,
    LicenseAuditError,
    ParseError,
    ScrapeError,
    UnknownGroupError,
)
from .model import (
    Authority,
    AuthorityEntry,
    AuthoritySource,
    Discrepancy,
    DiscrepancyKind,
    FieldSet,
    LicenseRecord,
    MetaField,
    MetaSchema,
    Rule,
    Ruleset,
    VerificationReport,
)
from .normalize import normalize
from .reconciliation import ReconciliationEngine

__all__ = [
    "Authority",
    "AuthorityCache",
    "AuthorityEntry",
    "AuthorityError",
    "AuthoritySource",
    "CatalogEntry",
    "CorpusError",
    "CorpusLoader",
    "Discrepancy",
    "DiscrepancyKind",
    "FetchError",
    "FieldSet",
    "LicenseAuditError",
    "LicenseCatalog",
    "LicenseRecord",
    "MetaField",
    "MetaSchema",
    "ParseError",
    "ReconciliationEngine",
    "Rule",
    "Ruleset",
    "ScrapeError",
    "UnknownGroupError",
    "VerificationReport",
    "normalize",
]
