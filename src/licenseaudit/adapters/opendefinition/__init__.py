"""Open Definition adapter."""

from __future__ import annotations

from .client import OpenDefinitionClient
from .schema import OpenDefinitionGroup, OpenDefinitionLicense

__all__ = ["OpenDefinitionClient", "OpenDefinitionGroup", "OpenDefinitionLicense"]
