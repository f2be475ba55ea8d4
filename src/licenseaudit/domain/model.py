"""Value types shared by the corpus loader, the cache and the reconciliation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from .errors import CorpusError, UnknownGroupError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


class Authority(StrEnum):
    """Bodies whose published lists decide whether a license is approved."""

    OSI = "osi"
    FSF = "fsf"
    OD = "od"


class AuthoritySource(StrEnum):
    """Datasets fetched from the network; OSI approval is a view over SPDX."""

    SPDX = "spdx"
    FSF = "fsf"
    OPEN_DEFINITION = "opendefinition"


# Front-matter keys that carry a record's own claim of approval.
DECLARED_APPROVAL_FIELDS: Final[Mapping[Authority, str]] = MappingProxyType(
    {
        Authority.OSI: "osi-approved",
        Authority.FSF: "fsf-approved",
        Authority.OD: "od-approved",
    }
)


@dataclass(frozen=True, slots=True)
class AuthorityEntry:
    key: str
    display_name: str
    source: Authority


@dataclass(frozen=True, slots=True)
class LicenseRecord:
    """One corpus document.

    ``fields`` holds every declared metadata key beyond the core attributes.
    """

    identifier: str
    title: str
    slug: str
    hidden: bool = False
    fields: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    def declared_approval(self, authority: Authority) -> bool | None:
        name = DECLARED_APPROVAL_FIELDS[authority]
        value = self.fields.get(name)
        if value is None:
            return None
        if not isinstance(value, bool):
            raise CorpusError(f"{self.identifier}: {name} must be true or false, got {value!r}")
        return value

    def rule_tags(self, group: str) -> tuple[str, ...]:
        value = self.fields.get(group)
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if isinstance(value, (list, tuple)):
            return tuple(str(tag) for tag in value)
        return ()


@dataclass(frozen=True, slots=True)
class Rule:
    tag: str
    label: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class Ruleset:
    """Rule groups (``permissions``, ``conditions``, ...) and the tags they define."""

    groups: Mapping[str, tuple[Rule, ...]]

    def has_rule(self, tag: str, group: str) -> bool:
        try:
            rules = self.groups[group]
        except KeyError:
            raise UnknownGroupError(group) from None
        return any(rule.tag == tag for rule in rules)

    def group_names(self) -> tuple[str, ...]:
        return tuple(self.groups)


@dataclass(frozen=True, slots=True)
class FieldSet:
    names: frozenset[str]

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.names))

    def __len__(self) -> int:
        return len(self.names)


@dataclass(frozen=True, slots=True)
class MetaField:
    name: str
    required: bool = False
    description: str | None = None


@dataclass(frozen=True, slots=True)
class MetaSchema:
    """Front-matter keys a license document may carry, and which of them it must."""

    fields: tuple[MetaField, ...] = ()

    def __contains__(self, name: object) -> bool:
        return any(item.name == name for item in self.fields)

    def required_names(self) -> tuple[str, ...]:
        return tuple(item.name for item in self.fields if item.required)


class DiscrepancyKind(StrEnum):
    APPROVAL_MISMATCH = "approval_mismatch"
    UNKNOWN_RULE = "unknown_rule"
    UNKNOWN_FIELD = "unknown_field"
    MISSING_FIELD = "missing_field"
    UNKNOWN_IDENTIFIER = "unknown_identifier"
    UNAPPROVED = "unapproved"


@dataclass(frozen=True, slots=True, kw_only=True)
class Discrepancy:
    kind: DiscrepancyKind
    record: str
    detail: str
    authority: Authority | None = None
    tag: str | None = None

    def __str__(self) -> str:
        return f"[{self.kind}] {self.record}: {self.detail}"


@dataclass(frozen=True, slots=True)
class VerificationReport:
    discrepancies: tuple[Discrepancy, ...] = ()
    checked: int = 0

    @property
    def ok(self) -> bool:
        return not self.discrepancies

    def by_kind(self, kind: DiscrepancyKind) -> tuple[Discrepancy, ...]:
        return tuple(item for item in self.discrepancies if item.kind == kind)

    def for_record(self, identifier: str) -> tuple[Discrepancy, ...]:
        return tuple(item for item in self.discrepancies if item.record == identifier)

    @classmethod
    def collect(cls, discrepancies: Iterable[Discrepancy], *, checked: int) -> VerificationReport:
        return cls(discrepancies=tuple(discrepancies), checked=checked)
