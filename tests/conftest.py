from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import load_dotenv

from licenseaudit.config.authorities import FsfConfig, OpenDefinitionConfig, SpdxConfig
from licenseaudit.config.corpus import CorpusConfig
from licenseaudit.config.http_resilience import ResilienceConfig
from tests.support.http import StubTransport, file_responder

load_dotenv()

DATA_DIR = Path(__file__).resolve().parent / "data"

SPDX_URL = "https://spdx.test/licenses/licenses.json"
FSF_URL = "https://gnu.test/licenses/license-list.en.html"
OD_URL = "https://opendefinition.test/licenses/groups/od.json"


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-network",
        action="store_true",
        default=False,
        help="run verification against the live authority endpoints",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-network"):
        return
    skip_network = pytest.mark.skip(reason="needs --run-network")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip_network)


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def spdx_config() -> SpdxConfig:
    return SpdxConfig(url=SPDX_URL, resilience=ResilienceConfig(name="spdx"))


@pytest.fixture
def fsf_config() -> FsfConfig:
    return FsfConfig(url=FSF_URL, resilience=ResilienceConfig(name="fsf"))


@pytest.fixture
def od_config() -> OpenDefinitionConfig:
    return OpenDefinitionConfig(url=OD_URL, resilience=ResilienceConfig(name="opendefinition"))


@pytest.fixture
def corpus_config() -> CorpusConfig:
    return CorpusConfig(root=DATA_DIR / "corpus")


@pytest.fixture
def spdx_transport() -> StubTransport:
    return StubTransport(
        file_responder(DATA_DIR / "spdx" / "licenses.json", content_type="application/json")
    )


@pytest.fixture
def fsf_transport() -> StubTransport:
    return StubTransport(
        file_responder(DATA_DIR / "fsf" / "license-list.html", content_type="text/html")
    )


@pytest.fixture
def od_transport() -> StubTransport:
    return StubTransport(
        file_responder(DATA_DIR / "opendefinition" / "od.json", content_type="application/json")
    )
