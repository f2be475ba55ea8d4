"""Verification of the configured corpus against the live authorities.

Run with ``pytest --run-network`` and ``LICENSEAUDIT_CORPUS_DIR`` pointing at the
corpus root.
"""

from __future__ import annotations

import os

import pytest

from licenseaudit.app import build_engine, verify_corpus
from licenseaudit.common.logging import configure_logging
from licenseaudit.domain.model import VerificationReport

pytestmark = pytest.mark.network


@pytest.fixture(scope="module")
def live_report() -> VerificationReport:
    if not os.getenv("LICENSEAUDIT_CORPUS_DIR"):
        pytest.skip("LICENSEAUDIT_CORPUS_DIR is not set")
    configure_logging(force=True)
    return verify_corpus(build_engine())


def test_corpus_matches_authorities(live_report: VerificationReport) -> None:
    assert live_report.ok, "\n".join(str(item) for item in live_report.discrepancies)
