# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, API limits, and fixed SARIF values."""

from enum import StrEnum


class Severity(StrEnum):
    """FoD ``severityString`` strata, highest first."""

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


SEVERITY_ORDER: tuple[Severity, ...] = (
    Severity.CRITICAL,
    Severity.HIGH,
    Severity.MEDIUM,
    Severity.LOW,
)

STATIC_SCAN_TYPE = "Static"
COMPLETED_STATUS = "Completed"

# FoD caps every filtered vulnerability query at this many items.
MAX_FILTERED_ISSUES = 1000
DEFAULT_PAGE_LIMIT = 50

AUTH_SCOPE = "view-apps view-issues"

SARIF_SCHEMA = (
    "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/"
    "Schemata/sarif-schema-2.1.0.json"
)
SARIF_VERSION = "2.1.0"
DRIVER_NAME = "Fortify on Demand"
DEFAULT_RESULT_LEVEL = "warning"
REGION_START_COLUMN = 1
REGION_END_COLUMN = 80
