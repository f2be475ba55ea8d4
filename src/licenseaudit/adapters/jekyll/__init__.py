"""Jekyll collection content source."""

from __future__ import annotations

from .content import JekyllContentSource, read_front_matter

__all__ = ["JekyllContentSource", "read_front_matter"]
