# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Standardized exit codes for CI/CD pipeline integrations.

Exit codes:
    0 SUCCESS: SARIF document written
    1 UNEXPECTED_ERROR: internal error
    2 CONFIGURATION_ERROR: missing or inconsistent inputs
    3 AUTHENTICATION_ERROR: token exchange failed
    4 RELEASE_ERROR: release or scan summary lookup failed
    5 PAGING_ERROR: a vulnerability index page failed
    6 OUTPUT_ERROR: the SARIF file could not be written
"""

from __future__ import annotations

from enum import IntEnum

from fod_sarif.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    OutputError,
    PagingError,
    ReleaseProbeError,
)


class CIExitCode(IntEnum):
    """Exit codes used by fod-sarif."""

    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    CONFIGURATION_ERROR = 2
    AUTHENTICATION_ERROR = 3
    RELEASE_ERROR = 4
    PAGING_ERROR = 5
    OUTPUT_ERROR = 6


_ERROR_MAP: tuple[tuple[type[Exception], CIExitCode], ...] = (
    (ConfigurationError, CIExitCode.CONFIGURATION_ERROR),
    (AuthenticationError, CIExitCode.AUTHENTICATION_ERROR),
    (ReleaseProbeError, CIExitCode.RELEASE_ERROR),
    (PagingError, CIExitCode.PAGING_ERROR),
    (OutputError, CIExitCode.OUTPUT_ERROR),
)


def error_to_exit_code(error: BaseException) -> CIExitCode:
    """Map a fatal exception to the process exit code."""
    for error_type, code in _ERROR_MAP:
        if isinstance(error, error_type):
            return code
    return CIExitCode.UNEXPECTED_ERROR
