# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CI/CD integration module for fod-sarif."""

from fod_sarif.ci.exit_codes import CIExitCode, error_to_exit_code

__all__ = [
    "CIExitCode",
    "error_to_exit_code",
]
