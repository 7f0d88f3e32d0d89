# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Release classification and severity selection.

FoD refuses to return more than ``MAX_FILTERED_ISSUES`` items for a single
filtered vulnerability query. The probe inspects the per-severity totals of
a release and picks the widest set of severity strata, highest first, whose
combined count stays within that cap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from fod_sarif.client.gateway import FodGateway
from fod_sarif.core.constants import MAX_FILTERED_ISSUES, SEVERITY_ORDER, STATIC_SCAN_TYPE, Severity
from fod_sarif.core.exceptions import ApiError, ReleaseProbeError
from fod_sarif.models.fod import Release, ScanSummary

logger = logging.getLogger("fod_sarif.export.probe")


@dataclass(frozen=True, slots=True)
class SeveritySelection:
    """Which severity strata to retrieve.

    Always monotone: a lower stratum is only included together with every
    higher one.
    """

    critical: bool = False
    high: bool = False
    medium: bool = False
    low: bool = False

    def __post_init__(self) -> None:
        flags = self.as_tuple()
        for higher, lower in zip(flags, flags[1:]):
            if lower and not higher:
                msg = f"Severity selection must be monotone, got {flags}"
                raise ValueError(msg)

    @classmethod
    def top(cls, count: int) -> SeveritySelection:
        """Select the *count* highest strata."""
        flags = [i < count for i in range(len(SEVERITY_ORDER))]
        return cls(*flags)

    def as_tuple(self) -> tuple[bool, bool, bool, bool]:
        return (self.critical, self.high, self.medium, self.low)

    @property
    def is_empty(self) -> bool:
        return not self.critical

    @property
    def severities(self) -> list[Severity]:
        return [s for s, on in zip(SEVERITY_ORDER, self.as_tuple()) if on]


def select_severities(release: Release, cap: int = MAX_FILTERED_ISSUES) -> SeveritySelection:
    """Pick the widest severity selection that stays within *cap* items."""
    c, h, m = release.critical, release.high, release.medium
    if release.issue_count <= cap:
        return SeveritySelection.top(4)
    if c + h + m <= cap:
        return SeveritySelection.top(3)
    if c + h <= cap:
        return SeveritySelection.top(2)
    if c <= cap:
        return SeveritySelection.top(1)
    return SeveritySelection.top(0)


@dataclass(slots=True)
class ProbeOutcome:
    """Result of probing a release.

    ``selection`` and ``scan_summary`` are ``None`` when the release has no
    exportable data; ``reason`` then says why.
    """

    release: Release
    selection: SeveritySelection | None = None
    scan_summary: ScanSummary | None = None
    reason: str | None = None

    @property
    def has_data(self) -> bool:
        return self.selection is not None


class ReleaseProbe:
    """Fetch and classify a release before any vulnerability is pulled."""

    def __init__(self, gateway: FodGateway) -> None:
        self._gateway = gateway

    async def probe(self, release_id: str) -> ProbeOutcome:
        """Classify *release_id*.

        Raises:
            ReleaseProbeError: If the release or its scan summary cannot be read.
        """
        release = await self.get_release(release_id)

        if not release.is_completed:
            reason = (
                f"The scan is incomplete (status: {release.static_analysis_status or 'unknown'})"
            )
            logger.warning("%s; no vulnerabilities exported", reason)
            return ProbeOutcome(release=release, reason=reason)
        if release.suspended:
            reason = "The release is suspended"
            logger.warning("%s; no vulnerabilities exported", reason)
            return ProbeOutcome(release=release, reason=reason)

        selection = select_severities(release)
        logger.info(
            "Release %s (%s / %s): %d issues (critical=%d high=%d medium=%d low=%d), selected %s",
            release.release_id,
            release.application_name or "?",
            release.release_name or "?",
            release.issue_count,
            release.critical,
            release.high,
            release.medium,
            release.low,
            ", ".join(selection.severities) or "nothing",
        )

        scan_summary = None
        if release.current_static_scan_id is not None:
            scan_summary = await self.get_scan_summary(release.current_static_scan_id)
            logger.debug(
                "Scan %s: engine %s, rule pack %s",
                scan_summary.scan_id or release.current_static_scan_id,
                scan_summary.engine_version or "?",
                scan_summary.rule_pack_version or "?",
            )
        else:
            logger.warning("Release %s has no current static scan id", release.release_id)

        return ProbeOutcome(release=release, selection=selection, scan_summary=scan_summary)

    async def get_release(self, release_id: str) -> Release:
        try:
            data = await self._gateway.get(
                f"/api/v3/releases/{release_id}",
                params={"filters": f"scantype:{STATIC_SCAN_TYPE}"},
            )
            return Release.model_validate(data)
        except (ApiError, ValidationError) as exc:
            raise ReleaseProbeError(f"Cannot read release {release_id}: {exc}") from exc

    async def get_scan_summary(self, scan_id: int) -> ScanSummary:
        try:
            data = await self._gateway.get(f"/api/v3/scans/{scan_id}/summary")
            return ScanSummary.model_validate(data)
        except (ApiError, ValidationError) as exc:
            raise ReleaseProbeError(f"Cannot read scan summary {scan_id}: {exc}") from exc
