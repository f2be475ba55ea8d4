"""SPDX license list adapter."""

from __future__ import annotations

from .client import SpdxClient
from .schema import SpdxLicense, SpdxLicenseList
from .translator import translate_license_list

__all__ = ["SpdxClient", "SpdxLicense", "SpdxLicenseList", "translate_license_list"]
