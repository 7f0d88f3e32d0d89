# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for fod-sarif."""

from fod_sarif.models.fod import (
    Release,
    ScanSummary,
    VulnerabilityDetail,
    VulnerabilityPage,
    VulnerabilitySummary,
)
from fod_sarif.models.sarif import SarifReport, SarifResult, SarifRule

__all__ = [
    "Release",
    "SarifReport",
    "SarifResult",
    "SarifRule",
    "ScanSummary",
    "VulnerabilityDetail",
    "VulnerabilityPage",
    "VulnerabilitySummary",
]
