# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""FoD to SARIF export pipeline."""

from fod_sarif.export.assembler import SarifAssembler, to_json, write_sarif
from fod_sarif.export.details import DetailFetcher, FetchOutcome
from fod_sarif.export.paginator import ExportStats, Paginator, build_filters
from fod_sarif.export.pipeline import ExportPipeline, ExportSummary
from fod_sarif.export.probe import ProbeOutcome, ReleaseProbe, SeveritySelection, select_severities

__all__ = [
    "DetailFetcher",
    "ExportPipeline",
    "ExportStats",
    "ExportSummary",
    "FetchOutcome",
    "Paginator",
    "ProbeOutcome",
    "ReleaseProbe",
    "SarifAssembler",
    "SeveritySelection",
    "build_filters",
    "select_severities",
    "to_json",
    "write_sarif",
]
