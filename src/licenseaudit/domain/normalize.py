"""Single matching-key function shared by every comparison."""

from __future__ import annotations


def normalize(value: str) -> str:
    """Return the matching key for an identifier or name: trimmed and lowercased.

    ``normalize("MIT")``, ``normalize("mit")`` and ``normalize(" Mit ")`` are equal,
    and ``normalize(normalize(x)) == normalize(x)``.
    """

    return value.strip().lower()
