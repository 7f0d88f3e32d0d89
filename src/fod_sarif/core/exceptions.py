# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for fod-sarif."""


class FodSarifError(Exception):
    """Base exception for all fod-sarif errors."""


class ConfigurationError(FodSarifError):
    """Invalid or missing configuration."""


class ApiError(FodSarifError):
    """A single FoD API request failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(FodSarifError):
    """Token exchange failed or returned no access token."""


class ReleaseProbeError(FodSarifError):
    """Release or scan summary lookup failed."""


class PagingError(FodSarifError):
    """A vulnerability index page could not be retrieved."""


class OutputError(FodSarifError):
    """The SARIF document could not be written."""
