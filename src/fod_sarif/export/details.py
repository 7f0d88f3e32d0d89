# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-vulnerability detail retrieval and SARIF synthesis."""

from __future__ import annotations

import logging
from enum import StrEnum

from pydantic import ValidationError

from fod_sarif.client.gateway import FodGateway
from fod_sarif.client.throttle import RateLimiter
from fod_sarif.core.constants import DEFAULT_RESULT_LEVEL, REGION_END_COLUMN, REGION_START_COLUMN
from fod_sarif.core.exceptions import ApiError
from fod_sarif.export.assembler import SarifAssembler
from fod_sarif.export.text import html_to_text
from fod_sarif.models.fod import VulnerabilityDetail, VulnerabilitySummary
from fod_sarif.models.sarif import (
    SarifArtifactLocation,
    SarifLocation,
    SarifMessage,
    SarifMultiformatMessage,
    SarifPhysicalLocation,
    SarifPropertyBag,
    SarifRegion,
    SarifResult,
    SarifRule,
)

logger = logging.getLogger("fod_sarif.export.details")


class FetchOutcome(StrEnum):
    EXPORTED = "exported"
    SKIPPED = "skipped"
    FAILED = "failed"
    INVALID = "invalid"


def issue_url(web_base_url: str, vuln: VulnerabilitySummary) -> str:
    """Link to the vulnerability in the FoD web UI."""
    return f"{web_base_url.rstrip('/')}/redirect/Issues/{vuln.vuln_id}"


def rule_id_for(vuln: VulnerabilitySummary, detail: VulnerabilityDetail) -> str:
    return detail.rule_id or vuln.id


def build_result(vuln: VulnerabilitySummary, detail: VulnerabilityDetail) -> SarifResult:
    # SARIF lines are 1-based; FoD reports 0 for file-level issues
    line = max(1, vuln.line_number)
    return SarifResult(
        ruleId=rule_id_for(vuln, detail),
        level=DEFAULT_RESULT_LEVEL,
        message=SarifMessage(text=html_to_text(detail.summary) or vuln.category),
        locations=[
            SarifLocation(
                physicalLocation=SarifPhysicalLocation(
                    artifactLocation=SarifArtifactLocation(uri=vuln.primary_location_full),
                    region=SarifRegion(
                        startLine=line,
                        endLine=line,
                        startColumn=REGION_START_COLUMN,
                        endColumn=REGION_END_COLUMN,
                    ),
                )
            )
        ],
        partialFingerprints={"issueInstanceId": vuln.instance_id},
    )


def build_rule(
    vuln: VulnerabilitySummary,
    detail: VulnerabilityDetail,
    web_base_url: str,
) -> SarifRule:
    url = issue_url(web_base_url, vuln)
    return SarifRule(
        id=rule_id_for(vuln, detail),
        shortDescription=SarifMessage(text=vuln.category),
        fullDescription=SarifMessage(
            text=html_to_text(detail.summary) or html_to_text(detail.explanation)
        ),
        help=SarifMultiformatMessage(
            text=f"See {url} for more information.",
            markdown=f"See [Fortify on Demand]({url}) for more information.",
        ),
        properties=SarifPropertyBag(tags=[vuln.severity_string]),
    )


class DetailFetcher:
    """Turn index items into SARIF results, one throttled request each.

    A failed detail request is logged and the vulnerability is dropped; it
    never aborts the export.
    """

    def __init__(
        self,
        gateway: FodGateway,
        limiter: RateLimiter,
        assembler: SarifAssembler,
        web_base_url: str,
    ) -> None:
        self._gateway = gateway
        self._limiter = limiter
        self._assembler = assembler
        self._web_base_url = web_base_url

    async def fetch(self, release_id: str, vuln: VulnerabilitySummary) -> FetchOutcome:
        if not vuln.is_static:
            logger.debug("Skipping %s vulnerability %s", vuln.scantype or "unknown", vuln.vuln_id)
            return FetchOutcome.SKIPPED

        try:
            async with self._limiter:
                data = await self._gateway.get(
                    f"/api/v3/releases/{release_id}/vulnerabilities/{vuln.vuln_id}/details"
                )
            detail = VulnerabilityDetail.model_validate(data)
        except (ApiError, ValidationError) as exc:
            logger.warning("%s - Ignoring vulnerability %s", exc, vuln.vuln_id)
            return FetchOutcome.FAILED

        self._assembler.add_rule(build_rule(vuln, detail, self._web_base_url))
        self._assembler.add_result(build_result(vuln, detail))
        return FetchOutcome.EXPORTED
