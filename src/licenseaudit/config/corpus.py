"""Corpus location configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import require_env_vars
from .errors import ConfigurationError

LICENSES_DIR_NAME: Final[str] = "_licenses"
DATA_DIR_NAME: Final[str] = "_data"


@dataclass(frozen=True, slots=True)
class CorpusConfig:
    root: Path
    licenses_dir_name: str = LICENSES_DIR_NAME
    data_dir_name: str = DATA_DIR_NAME

    def resolve_root(self) -> Path:
        return self.root.expanduser().resolve()

    def licenses_dir(self) -> Path:
        return self.resolve_root() / self.licenses_dir_name

    def data_dir(self) -> Path:
        return self.resolve_root() / self.data_dir_name


def get_corpus_config() -> CorpusConfig:
    values = require_env_vars(("LICENSEAUDIT_CORPUS_DIR",))
    config = CorpusConfig(root=Path(values["LICENSEAUDIT_CORPUS_DIR"]))
    if not config.licenses_dir().is_dir():
        raise ConfigurationError(f"No {LICENSES_DIR_NAME} directory under {config.resolve_root()}")
    return config
