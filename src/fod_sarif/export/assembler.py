# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Accumulate SARIF rules and results and render the final document."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from fod_sarif.core.exceptions import OutputError
from fod_sarif.models.fod import ScanSummary
from fod_sarif.models.sarif import (
    SarifDriver,
    SarifReport,
    SarifResult,
    SarifRule,
    SarifRun,
    SarifTool,
)

logger = logging.getLogger("fod_sarif.export.assembler")


def driver_version(scan_summary: ScanSummary | None) -> str | None:
    """``"<engineVersion> <rulePackVersion>"``, or ``None`` without a summary."""
    if scan_summary is None:
        return None
    parts = [scan_summary.engine_version, scan_summary.rule_pack_version]
    version = " ".join(p for p in parts if p)
    return version or None


class SarifAssembler:
    """Collects rule descriptors and results for a single SARIF run.

    Rules are keyed by id: a descriptor whose id was already added is
    dropped, so every result's ``ruleId`` maps to exactly one rule.
    Both collections keep arrival order.
    """

    def __init__(self) -> None:
        self.rules: list[SarifRule] = []
        self.results: list[SarifResult] = []
        self._rule_ids: set[str] = set()

    def add_rule(self, rule: SarifRule) -> bool:
        """Append *rule*; return ``False`` if its id was already present."""
        if rule.id in self._rule_ids:
            return False
        self._rule_ids.add(rule.id)
        self.rules.append(rule)
        return True

    def add_result(self, result: SarifResult) -> None:
        self.results.append(result)

    def render(self, scan_summary: ScanSummary | None = None) -> SarifReport:
        driver = SarifDriver(
            version=driver_version(scan_summary),
            rules=list(self.rules),
        )
        run = SarifRun(tool=SarifTool(driver=driver), results=list(self.results))
        return SarifReport(runs=[run])


def to_json(report: SarifReport) -> str:
    """Serialize *report* with two-space indentation, omitting unset fields."""
    data = report.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(data, indent=2)


def write_sarif(report: SarifReport, path: Path) -> Path:
    """Write *report* to *path*, creating parent directories as needed.

    Raises:
        OutputError: If the directory or file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(to_json(report) + "\n", encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Cannot write SARIF output to {path}: {exc}") from exc
    logger.info("SARIF written to %s", path)
    return path
