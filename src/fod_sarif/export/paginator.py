# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Walk the release vulnerability index page by page."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from fod_sarif.client.gateway import FodGateway
from fod_sarif.core.constants import DEFAULT_PAGE_LIMIT, STATIC_SCAN_TYPE
from fod_sarif.core.exceptions import ApiError, PagingError
from fod_sarif.export.details import DetailFetcher, FetchOutcome
from fod_sarif.export.probe import SeveritySelection
from fod_sarif.models.fod import VulnerabilityPage, VulnerabilitySummary

logger = logging.getLogger("fod_sarif.export.paginator")


def build_filters(selection: SeveritySelection) -> str | None:
    """Build the ``filters`` query value, or ``None`` for an empty selection.

    >>> build_filters(SeveritySelection(True, True, False, False))
    'scantype:Static+severityString:Critical|High'
    """
    if selection.is_empty:
        return None
    strata = "|".join(selection.severities)
    return f"scantype:{STATIC_SCAN_TYPE}+severityString:{strata}"


@dataclass(slots=True)
class ExportStats:
    pages: int = 0
    items: int = 0
    exported: int = 0
    skipped: int = 0
    failed: int = 0
    invalid: int = 0

    def record(self, outcome: FetchOutcome) -> None:
        self.items += 1
        if outcome == FetchOutcome.EXPORTED:
            self.exported += 1
        elif outcome == FetchOutcome.SKIPPED:
            self.skipped += 1
        elif outcome == FetchOutcome.INVALID:
            self.invalid += 1
        else:
            self.failed += 1


class Paginator:
    """Fetch index pages sequentially and fan each page out to the fetcher.

    Every detail fetch of a page completes before the next page is
    requested.
    """

    def __init__(
        self,
        gateway: FodGateway,
        fetcher: DetailFetcher,
        page_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> None:
        self._gateway = gateway
        self._fetcher = fetcher
        self.page_limit = page_limit

    async def run(self, release_id: str, selection: SeveritySelection) -> ExportStats:
        stats = ExportStats()
        filters = build_filters(selection)
        if filters is None:
            logger.info("No severity selected for release %s; skipping pagination", release_id)
            return stats

        offset = 0
        while True:
            page = await self.get_page(release_id, filters, offset)
            stats.pages += 1
            logger.debug(
                "Page offset=%d: %d items of %d", offset, len(page.items), page.total_count
            )

            vulns = self._parse_items(page.items, offset, stats)
            outcomes = await asyncio.gather(
                *(self._fetcher.fetch(release_id, vuln) for vuln in vulns),
                return_exceptions=True,
            )
            # raise only once every fetch of the page has settled
            for outcome in outcomes:
                if isinstance(outcome, BaseException):
                    raise outcome
                stats.record(outcome)

            if not page.items or page.total_count <= offset + self.page_limit:
                break
            offset += self.page_limit

        logger.info(
            "Processed %d vulnerabilities in %d pages: "
            "%d exported, %d skipped, %d failed, %d invalid",
            stats.items,
            stats.pages,
            stats.exported,
            stats.skipped,
            stats.failed,
            stats.invalid,
        )
        return stats

    async def get_page(self, release_id: str, filters: str, offset: int) -> VulnerabilityPage:
        params = {
            "filters": filters,
            "excludeFilters": "true",
            "offset": offset,
            "limit": self.page_limit,
        }
        try:
            data = await self._gateway.get(
                f"/api/v3/releases/{release_id}/vulnerabilities", params=params
            )
            return VulnerabilityPage.model_validate(data)
        except (ApiError, ValidationError) as exc:
            raise PagingError(
                f"Cannot read vulnerabilities of release {release_id} at offset {offset}: {exc}"
            ) from exc

    @staticmethod
    def _parse_items(
        items: list[object], offset: int, stats: ExportStats
    ) -> list[VulnerabilitySummary]:
        """Validate index items one by one, dropping the malformed ones."""
        vulns = []
        for index, raw in enumerate(items):
            try:
                vulns.append(VulnerabilitySummary.model_validate(raw))
            except ValidationError as exc:
                fields = ", ".join(".".join(map(str, e["loc"])) or "item" for e in exc.errors())
                logger.warning(
                    "Ignoring malformed vulnerability at offset %d (%s)", offset + index, fields
                )
                stats.record(FetchOutcome.INVALID)
        return vulns
