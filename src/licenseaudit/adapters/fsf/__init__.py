"""FSF license list adapter."""

from __future__ import annotations

from .client import FsfClient
from .scraper import ALIASES, parse_approved

__all__ = ["ALIASES", "FsfClient", "parse_approved"]
