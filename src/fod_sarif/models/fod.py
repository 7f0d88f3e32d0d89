# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pydantic models for Fortify on Demand API responses.

Only the fields the exporter reads are declared; everything else in the
payloads is ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_core import PydanticUndefined

from fod_sarif.core.constants import COMPLETED_STATUS, STATIC_SCAN_TYPE


class FodModel(BaseModel):
    """Base for FoD payloads: an explicit JSON ``null`` falls back to the field default.

    Required fields have no default and still reject ``null``.
    """

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        if v is not None or info.field_name is None:
            return v
        default = cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v if default is PydanticUndefined else default


class Release(FodModel):
    """Release descriptor from ``GET /api/v3/releases/{id}``."""

    release_id: str = Field(alias="releaseId")
    release_name: str = Field(default="", alias="releaseName")
    application_name: str = Field(default="", alias="applicationName")
    static_analysis_status: str = Field(default="", alias="staticAnalysisStatusType")
    suspended: bool = False
    current_static_scan_id: int | None = Field(default=None, alias="currentStaticScanId")
    critical: int = Field(default=0, ge=0)
    high: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    low: int = Field(default=0, ge=0)
    issue_count: int = Field(default=0, ge=0, alias="issueCount")

    model_config = {"coerce_numbers_to_str": True}

    @property
    def is_completed(self) -> bool:
        return self.static_analysis_status == COMPLETED_STATUS


class StaticScanSummaryDetails(FodModel):
    engine_version: str = Field(default="", alias="engineVersion")
    rule_pack_version: str = Field(default="", alias="rulePackVersion")


class ScanSummary(FodModel):
    """Scan metadata from ``GET /api/v3/scans/{id}/summary``."""

    scan_id: int | None = Field(default=None, alias="scanId")
    static_details: StaticScanSummaryDetails = Field(
        default_factory=StaticScanSummaryDetails,
        alias="staticScanSummaryDetails",
    )

    @property
    def engine_version(self) -> str:
        return self.static_details.engine_version

    @property
    def rule_pack_version(self) -> str:
        return self.static_details.rule_pack_version


class VulnerabilitySummary(FodModel):
    """One item of the paginated vulnerability index."""

    id: str
    vuln_id: str = Field(alias="vulnId")
    instance_id: str = Field(default="", alias="instanceId")
    category: str = ""
    severity: int = 0
    severity_string: str = Field(default="", alias="severityString")
    scantype: str = ""
    primary_location_full: str = Field(default="", alias="primaryLocationFull")
    line_number: int = Field(default=1, alias="lineNumber")

    model_config = {"coerce_numbers_to_str": True}

    @property
    def is_static(self) -> bool:
        return self.scantype == STATIC_SCAN_TYPE


class VulnerabilityPage(FodModel):
    """A page of ``GET /api/v3/releases/{id}/vulnerabilities``.

    Items stay raw so the paginator can validate and drop malformed entries
    one at a time.
    """

    items: list[Any] = Field(default_factory=list)
    total_count: int = Field(default=0, alias="totalCount")


class VulnerabilityDetail(FodModel):
    """Payload of ``GET /api/v3/releases/{id}/vulnerabilities/{vulnId}/details``."""

    rule_id: str | None = Field(default=None, alias="ruleId")
    summary: str = ""
    explanation: str = ""
