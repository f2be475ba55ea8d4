"""Load license records and the rule/field schema from the content collaborator."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from .errors import CorpusError
from .model import FieldSet, LicenseRecord, MetaField, MetaSchema, Rule, Ruleset
from .normalize import normalize

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports import ContentSource

log = logging.getLogger(__name__)

IDENTIFIER_KEY: Final[str] = "spdx-id"
TITLE_KEY: Final[str] = "title"
HIDDEN_KEY: Final[str] = "hidden"
SLUG_KEY: Final[str] = "slug"
CORE_KEYS: Final[frozenset[str]] = frozenset({IDENTIFIER_KEY, TITLE_KEY, HIDDEN_KEY, SLUG_KEY})

RULES_SECTION: Final[str] = "rules"
FIELDS_SECTION: Final[str] = "fields"
META_SECTION: Final[str] = "meta"


class CorpusLoader:
    """Read-only access to the corpus; each part is loaded once per loader."""

    def __init__(self, source: ContentSource) -> None:
        self._source = source
        self._records: tuple[LicenseRecord, ...] | None = None
        self._rules: Ruleset | None = None
        self._fields: FieldSet | None = None
        self._meta: MetaSchema | None = None

    def load_corpus(self) -> tuple[LicenseRecord, ...]:
        if self._records is None:
            records = [_record_from_document(document) for document in self._source.documents()]
            records.sort(key=lambda record: record.slug)
            self._records = tuple(records)
            log.info("Loaded %d license records", len(self._records))
        return self._records

    @staticmethod
    def shown(records: Iterable[LicenseRecord]) -> tuple[LicenseRecord, ...]:
        return tuple(record for record in records if not record.hidden)

    def load_rules(self) -> Ruleset:
        if self._rules is None:
            self._rules = _ruleset_from_section(self._section(RULES_SECTION))
        return self._rules

    def load_fields(self) -> FieldSet:
        if self._fields is None:
            self._fields = _fieldset_from_section(self._section(FIELDS_SECTION))
        return self._fields

    def load_meta(self) -> MetaSchema:
        """Front-matter schema; a corpus without a ``meta`` section declares none."""

        if self._meta is None:
            section = self._source.data(META_SECTION)
            self._meta = MetaSchema() if section is None else _meta_from_section(section)
        return self._meta

    def _section(self, name: str) -> object:
        section = self._source.data(name)
        if section is None:
            raise CorpusError(f"Corpus schema has no {name!r} section")
        return section


def _record_from_document(document: Mapping[str, object]) -> LicenseRecord:
    slug = str(document.get(SLUG_KEY) or "").strip()
    identifier = document.get(IDENTIFIER_KEY)
    title = document.get(TITLE_KEY)
    if not isinstance(identifier, str) or not identifier.strip():
        raise CorpusError(f"License document {slug or '<unnamed>'!r} has no {IDENTIFIER_KEY}")
    if not isinstance(title, str) or not title.strip():
        raise CorpusError(f"License document {slug or identifier!r} has no {TITLE_KEY}")

    hidden = document.get(HIDDEN_KEY)
    if hidden is None:
        hidden = False
    if not isinstance(hidden, bool):
        name = slug or identifier
        raise CorpusError(f"License document {name!r}: {HIDDEN_KEY} must be true or false")

    fields = {key: value for key, value in document.items() if key not in CORE_KEYS}
    return LicenseRecord(
        identifier=identifier.strip(),
        title=title.strip(),
        slug=slug or normalize(identifier),
        hidden=hidden,
        fields=MappingProxyType(fields),
    )


def _ruleset_from_section(section: object) -> Ruleset:
    if not isinstance(section, Mapping):
        raise CorpusError(f"{RULES_SECTION!r} section must map group names to rule lists")

    groups: dict[str, tuple[Rule, ...]] = {}
    for group, entries in section.items():
        if not isinstance(entries, list):
            raise CorpusError(f"Rule group {group!r} must be a list")
        rules: list[Rule] = []
        for entry in entries:
            if not isinstance(entry, Mapping) or not entry.get("tag"):
                raise CorpusError(f"Rule in group {group!r} has no tag: {entry!r}")
            rules.append(
                Rule(
                    tag=str(entry["tag"]),
                    label=_optional_str(entry.get("label")),
                    description=_optional_str(entry.get("description")),
                )
            )
        groups[str(group)] = tuple(rules)
    return Ruleset(groups=MappingProxyType(groups))


def _fieldset_from_section(section: object) -> FieldSet:
    # Either a list of {name: ..., description: ...} entries, a list of names, or a mapping.
    if isinstance(section, Mapping):
        return FieldSet(names=frozenset(str(name) for name in section))
    if not isinstance(section, list):
        raise CorpusError(f"{FIELDS_SECTION!r} section must be a list or mapping")

    names: set[str] = set()
    for entry in section:
        if isinstance(entry, str):
            names.add(entry)
        elif isinstance(entry, Mapping) and entry.get("name"):
            names.add(str(entry["name"]))
        else:
            raise CorpusError(f"Field entry has no name: {entry!r}")
    return FieldSet(names=frozenset(names))


def _meta_from_section(section: object) -> MetaSchema:
    if not isinstance(section, list):
        raise CorpusError(f"{META_SECTION!r} section must be a list of field entries")

    entries: list[MetaField] = []
    for entry in section:
        if not isinstance(entry, Mapping) or not entry.get("name"):
            raise CorpusError(f"Meta entry has no name: {entry!r}")
        required = entry.get("required", False)
        if not isinstance(required, bool):
            raise CorpusError(f"Meta entry {entry['name']!r}: required must be a boolean")
        entries.append(
            MetaField(
                name=str(entry["name"]),
                required=required,
                description=_optional_str(entry.get("description")),
            )
        )
    return MetaSchema(fields=tuple(entries))


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
