"""Cross-reference corpus records against authority datasets and the corpus schema.

The engine never fetches or reads anything itself: authority data comes from the
``AuthorityCache`` and records from the ``CorpusLoader``. Authority failures are
not caught here. A verification pass either sees all three datasets or fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, cast

from .corpus import CORE_KEYS
from .model import (
    Authority,
    AuthorityEntry,
    AuthoritySource,
    Discrepancy,
    DiscrepancyKind,
    VerificationReport,
)
from .normalize import normalize

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .cache import AuthorityCache
    from .catalog import LicenseCatalog
    from .corpus import CorpusLoader
    from .model import FieldSet, LicenseRecord, MetaSchema, Ruleset

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconciliationEngine:
    corpus: CorpusLoader
    cache: AuthorityCache

    def catalog(self) -> LicenseCatalog:
        return cast("LicenseCatalog", self.cache.get_or_fetch(AuthoritySource.SPDX))

    def approvals(self, authority: Authority) -> Mapping[str, AuthorityEntry]:
        """Normalized key -> entry for one authority, read through the cache on every call."""

        match authority:
            case Authority.OSI:
                raw = self.catalog().osi_approved()
            case Authority.FSF:
                raw = cast("dict[str, str]", self.cache.get_or_fetch(AuthoritySource.FSF))
            case Authority.OD:
                raw = cast(
                    "dict[str, str]", self.cache.get_or_fetch(AuthoritySource.OPEN_DEFINITION)
                )

        entries = {
            normalize(key): AuthorityEntry(
                key=normalize(key), display_name=display_name, source=authority
            )
            for key, display_name in raw.items()
        }
        return MappingProxyType(entries)

    def recognizes(self, record: LicenseRecord, authority: Authority) -> bool:
        return self.match(record, authority) is not None

    def match(self, record: LicenseRecord, authority: Authority) -> AuthorityEntry | None:
        """Entry matched by identifier, falling back to title only when the id misses."""

        approvals = self.approvals(authority)
        entry = approvals.get(normalize(record.identifier))
        if entry is not None:
            return entry
        return approvals.get(normalize(record.title))

    def approved_licenses(self) -> tuple[str, ...]:
        keys: set[str] = set()
        for authority in Authority:
            keys.update(self.approvals(authority))
        return tuple(sorted(keys))

    def check_approvals(self, record: LicenseRecord) -> Iterator[Discrepancy]:
        for authority in Authority:
            declared = record.declared_approval(authority)
            if declared is None:
                continue
            recognized = self.recognizes(record, authority)
            if declared == recognized:
                continue
            if declared:
                detail = f"declared {authority}-approved but {authority} does not list it"
            else:
                detail = f"declared not {authority}-approved but {authority} lists it"
            yield Discrepancy(
                kind=DiscrepancyKind.APPROVAL_MISMATCH,
                record=record.identifier,
                authority=authority,
                detail=detail,
            )

    def check_identifier(self, record: LicenseRecord) -> Iterator[Discrepancy]:
        if not self.catalog().contains(record.identifier):
            yield Discrepancy(
                kind=DiscrepancyKind.UNKNOWN_IDENTIFIER,
                record=record.identifier,
                detail=f"{record.identifier!r} is not an SPDX license identifier",
            )

    def check_approved(self, record: LicenseRecord) -> Iterator[Discrepancy]:
        if record.hidden:
            return
        if any(self.recognizes(record, authority) for authority in Authority):
            return
        yield Discrepancy(
            kind=DiscrepancyKind.UNAPPROVED,
            record=record.identifier,
            detail="shown license is not approved by OSI, FSF or OD",
        )

    @staticmethod
    def check_schema(
        record: LicenseRecord,
        rules: Ruleset,
        fields: FieldSet,
        meta: MetaSchema | None = None,
    ) -> Iterator[Discrepancy]:
        groups = rules.group_names()
        for group in groups:
            seen: set[str] = set()
            for tag in record.rule_tags(group):
                if tag in seen:
                    continue
                seen.add(tag)
                if not rules.has_rule(tag, group):
                    yield Discrepancy(
                        kind=DiscrepancyKind.UNKNOWN_RULE,
                        record=record.identifier,
                        tag=tag,
                        detail=f"{group} tag {tag!r} is not defined in the rules schema",
                    )

        for name in record.fields:
            if name in groups or name in fields or (meta is not None and name in meta):
                continue
            yield Discrepancy(
                kind=DiscrepancyKind.UNKNOWN_FIELD,
                record=record.identifier,
                tag=name,
                detail=f"field {name!r} is not defined in the fields schema",
            )

        if meta is None:
            return
        for name in meta.required_names():
            if name in CORE_KEYS or name in record.fields:
                continue
            yield Discrepancy(
                kind=DiscrepancyKind.MISSING_FIELD,
                record=record.identifier,
                tag=name,
                detail=f"required field {name!r} is missing",
            )

    def verify(self) -> VerificationReport:
        records = self.corpus.load_corpus()
        rules = self.corpus.load_rules()
        fields = self.corpus.load_fields()
        meta = self.corpus.load_meta()

        discrepancies: list[Discrepancy] = []
        for record in records:
            discrepancies.extend(self.check_schema(record, rules, fields, meta))
            discrepancies.extend(self.check_identifier(record))
            discrepancies.extend(self.check_approvals(record))
            discrepancies.extend(self.check_approved(record))

        report = VerificationReport.collect(discrepancies, checked=len(records))
        log.info(
            "Verified %d records: %d discrepancies", report.checked, len(report.discrepancies)
        )
        return report
