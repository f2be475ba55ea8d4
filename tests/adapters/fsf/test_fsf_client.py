"""FSF client fetch behaviour."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from licenseaudit.adapters.fsf import FsfClient
from licenseaudit.domain.errors import FetchError, ScrapeError
from licenseaudit.domain.model import AuthoritySource
from tests.support.http import StubTransport, failing_responder, stub_client_factory, text_responder

if TYPE_CHECKING:
    from licenseaudit.config.authorities import FsfConfig


def test_fetch_approved_returns_scraped_mapping(
    fsf_config: FsfConfig, fsf_transport: StubTransport
) -> None:
    client = FsfClient(config=fsf_config, client_factory=stub_client_factory(fsf_transport))

    approved = client.fetch_approved()

    assert approved["bsd-3-clause-clear"] == "Clear BSD License"
    assert approved["unlicense"] == "The Unlicense"
    assert fsf_transport.call_count == 1
    assert str(fsf_transport.requests[0].url) == fsf_config.url


def test_fetch_approved_wraps_transport_errors(fsf_config: FsfConfig) -> None:
    client = FsfClient(
        config=fsf_config,
        client_factory=stub_client_factory(StubTransport(failing_responder)),
    )

    with pytest.raises(FetchError) as exc:
        client.fetch_approved()

    assert exc.value.source is AuthoritySource.FSF
    assert "fetch" in str(exc.value)


def test_fetch_approved_with_drifted_markup_raises_scrape_error(fsf_config: FsfConfig) -> None:
    transport = StubTransport(text_responder("<html><body><p>Moved.</p></body></html>"))
    client = FsfClient(config=fsf_config, client_factory=stub_client_factory(transport))

    with pytest.raises(ScrapeError):
        client.fetch_approved()
