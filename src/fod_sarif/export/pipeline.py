# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Export orchestration: authenticate, probe, paginate, assemble, persist."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from fod_sarif.client.auth import resolve_credentials
from fod_sarif.client.gateway import FodGateway, api_base_url
from fod_sarif.client.throttle import RateLimiter
from fod_sarif.core.config import Settings
from fod_sarif.core.exceptions import ConfigurationError
from fod_sarif.export.assembler import SarifAssembler, write_sarif
from fod_sarif.export.details import DetailFetcher
from fod_sarif.export.paginator import ExportStats, Paginator
from fod_sarif.export.probe import ReleaseProbe, SeveritySelection

logger = logging.getLogger("fod_sarif.export.pipeline")


@dataclass(slots=True)
class ExportSummary:
    """What a run produced."""

    release_id: str
    output: Path
    application: str = ""
    release_name: str = ""
    results: int = 0
    rules: int = 0
    selection: SeveritySelection | None = None
    stats: ExportStats = field(default_factory=ExportStats)
    reason: str | None = None
    duration_ms: int = 0


class ExportPipeline:
    """Run a single release export end to end.

    Parameters
    ----------
    settings:
        Inputs and tuning; see :class:`~fod_sarif.core.config.Settings`.
    limiter:
        Throttle for the detail endpoint. Built from *settings* when omitted.
    transport:
        Optional httpx transport shared by every request (used by tests).
    """

    def __init__(
        self,
        settings: Settings,
        *,
        limiter: RateLimiter | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.limiter = limiter or RateLimiter(
            rate=settings.detail_rate,
            rate_per=settings.detail_rate_period,
            concurrent=settings.detail_concurrency,
        )
        self._transport = transport

    def _validate(self) -> Path:
        missing = [
            name
            for name, value in (
                ("base-url", self.settings.base_url),
                ("release-id", self.settings.release_id),
            )
            if not value
        ]
        output = self.settings.output
        if output is None:
            missing.append("output")
        if missing:
            raise ConfigurationError(f"Missing required input(s): {', '.join(missing)}")
        try:
            api_base_url(self.settings.base_url)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        return output

    async def run(self) -> ExportSummary:
        """Export the configured release and write the SARIF document once.

        Raises:
            ConfigurationError: Before any network I/O when inputs are incomplete.
            AuthenticationError, ReleaseProbeError, PagingError, OutputError:
                On the corresponding fatal failure.
        """
        started = time.monotonic()
        output = self._validate()
        credentials = resolve_credentials(self.settings)
        release_id = self.settings.release_id

        summary = ExportSummary(release_id=release_id, output=output)
        assembler = SarifAssembler()
        scan_summary = None

        gateway = await FodGateway.authenticate(
            self.settings.base_url,
            credentials,
            timeout=self.settings.request_timeout,
            transport=self._transport,
        )
        async with gateway:
            outcome = await ReleaseProbe(gateway).probe(release_id)
            summary.reason = outcome.reason
            summary.selection = outcome.selection
            summary.application = outcome.release.application_name
            summary.release_name = outcome.release.release_name
            scan_summary = outcome.scan_summary

            if outcome.has_data and outcome.selection.is_empty:
                summary.reason = "Every severity exceeds the 1000 issue limit"
                logger.warning("%s; no vulnerabilities exported", summary.reason)
            elif outcome.has_data:
                fetcher = DetailFetcher(
                    gateway, self.limiter, assembler, web_base_url=self.settings.base_url
                )
                paginator = Paginator(gateway, fetcher, page_limit=self.settings.page_limit)
                summary.stats = await paginator.run(release_id, outcome.selection)

        report = assembler.render(scan_summary)
        write_sarif(report, output)

        summary.results = len(assembler.results)
        summary.rules = len(assembler.rules)
        summary.duration_ms = int((time.monotonic() - started) * 1000)
        logger.info(
            "Exported %d results (%d rules) for release %s in %.1fs",
            summary.results,
            summary.rules,
            release_id,
            summary.duration_ms / 1000,
        )
        return summary
