# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""fod-sarif - Export Fortify on Demand static findings as SARIF 2.1.0."""

__version__ = "0.1.0"

from fod_sarif.sdk import export_release, export_release_sync

__all__ = [
    "__version__",
    "export_release",
    "export_release_sync",
]
