"""Filesystem content source for a Jekyll-style license collection.

Layout::

    <root>/_licenses/<slug>.txt   front matter between '---' lines, then license text
    <root>/_data/<section>.yml    schema sections: rules.yml, fields.yml, meta.yml
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

import yaml

from licenseaudit.domain.errors import CorpusError
from licenseaudit.domain.normalize import normalize

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from licenseaudit.config.corpus import CorpusConfig

log = getLogger(__name__)

FRONT_MATTER_DELIMITER: Final[str] = "---"
DOCUMENT_SUFFIX: Final[str] = ".txt"


class JekyllContentSource:
    def __init__(self, config: CorpusConfig) -> None:
        self._config = config

    def documents(self) -> Iterator[dict[str, object]]:
        licenses_dir = self._config.licenses_dir()
        if not licenses_dir.is_dir():
            raise CorpusError(f"License collection not found: {licenses_dir}")
        for path in sorted(licenses_dir.glob(f"*{DOCUMENT_SUFFIX}")):
            document = read_front_matter(path)
            document["slug"] = normalize(path.stem)
            yield document

    def data(self, section: str) -> object:
        data_dir = self._config.data_dir()
        for suffix in (".yml", ".yaml"):
            path = data_dir / f"{section}{suffix}"
            if path.is_file():
                return _load_yaml(path.read_text(encoding="utf-8"), origin=path)
        log.debug("No data file for section %r under %s", section, data_dir)
        return None


def read_front_matter(path: Path) -> dict[str, object]:
    text = path.read_text(encoding="utf-8")
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        raise CorpusError(f"{path.name}: missing front matter")
    try:
        end = next(
            index
            for index, line in enumerate(lines[1:], start=1)
            if line.strip() == FRONT_MATTER_DELIMITER
        )
    except StopIteration:
        raise CorpusError(f"{path.name}: unterminated front matter") from None

    loaded = _load_yaml("\n".join(lines[1:end]), origin=path)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise CorpusError(f"{path.name}: front matter must be a mapping")
    return {str(key): value for key, value in loaded.items()}


def _load_yaml(text: str, *, origin: Path) -> object:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CorpusError(f"{origin.name}: invalid YAML: {exc}") from exc
