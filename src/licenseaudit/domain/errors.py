"""Failure taxonomy for a verification pass.

None of these are recovered inside the package. An authority that cannot be
fetched or parsed fails the pass, because a partial dataset would read as
"not recognized" for every license it is missing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import AuthoritySource


class LicenseAuditError(RuntimeError):
    """Base class for errors raised by licenseaudit."""


class AuthorityError(LicenseAuditError):
    """Raised when an authority's dataset cannot be obtained."""

    kind = "authority"

    def __init__(self, message: str, *, source: AuthoritySource) -> None:
        super().__init__(f"{source} {self.kind} error: {message}")
        self.source = source


class FetchError(AuthorityError):
    """Transport or HTTP status failure while reaching an authority."""

    kind = "fetch"


class ParseError(AuthorityError):
    """Payload is not in the expected machine-readable shape."""

    kind = "parse"


class ScrapeError(AuthorityError):
    """HTML is present but the expected structure yields no usable entries."""

    kind = "scrape"


class CorpusError(LicenseAuditError):
    """Raised when corpus documents or schema sections are missing or malformed."""


class UnknownGroupError(LicenseAuditError):
    """Raised when a rule lookup names a group the schema does not define."""

    def __init__(self, group: str) -> None:
        super().__init__(group)
        self.group = group

    def __str__(self) -> str:
        return f"Unknown rule group: {self.group!r}"
