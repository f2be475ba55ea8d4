"""Filesystem content source for the license collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from licenseaudit.adapters.jekyll import JekyllContentSource, read_front_matter
from licenseaudit.config.corpus import CorpusConfig
from licenseaudit.domain.errors import CorpusError

if TYPE_CHECKING:
    from pathlib import Path


def test_documents_include_front_matter_and_slug(corpus_config: CorpusConfig) -> None:
    documents = {doc["slug"]: doc for doc in JekyllContentSource(corpus_config).documents()}

    assert sorted(documents) == [
        "apache-2.0",
        "bsd-3-clause-clear",
        "cc0-1.0",
        "json",
        "mit",
        "unlicense",
    ]
    mit = documents["mit"]
    assert mit["spdx-id"] == "MIT"
    assert mit["title"] == "MIT License"
    assert mit["permissions"] == ["commercial-use", "modifications", "distribution", "private-use"]
    assert documents["json"]["hidden"] is True


def test_data_sections_load_yaml(corpus_config: CorpusConfig) -> None:
    source = JekyllContentSource(corpus_config)

    rules = source.data("rules")
    fields = source.data("fields")

    assert isinstance(rules, dict)
    assert set(rules) == {"permissions", "conditions", "limitations"}
    assert isinstance(fields, list)
    assert {"name": "how", "description": "Instructions on how to apply the license."} in fields


def test_meta_section_loads_required_flags(corpus_config: CorpusConfig) -> None:
    meta = JekyllContentSource(corpus_config).data("meta")

    assert isinstance(meta, list)
    required = {entry["name"] for entry in meta if entry["required"] is True}
    assert required == {"title", "spdx-id", "permissions", "conditions", "limitations"}


def test_missing_data_section_returns_none(corpus_config: CorpusConfig) -> None:
    assert JekyllContentSource(corpus_config).data("compatibility") is None


def test_missing_collection_raises(tmp_path: Path) -> None:
    source = JekyllContentSource(CorpusConfig(root=tmp_path))

    with pytest.raises(CorpusError):
        list(source.documents())


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("MIT License\n", "missing front matter"),
        ("---\ntitle: MIT\n", "unterminated front matter"),
        ("---\n- just\n- a list\n---\ntext\n", "must be a mapping"),
        ("---\ntitle: [unclosed\n---\n", "invalid YAML"),
    ],
)
def test_malformed_front_matter_raises(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "broken.txt"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(CorpusError, match=message):
        read_front_matter(path)


def test_empty_front_matter_is_empty_mapping(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("---\n---\nbody\n", encoding="utf-8")

    assert read_front_matter(path) == {}
