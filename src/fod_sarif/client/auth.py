# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""FoD credential shapes and grant selection."""

from __future__ import annotations

from dataclasses import dataclass

from fod_sarif.core.config import Settings
from fod_sarif.core.constants import AUTH_SCOPE
from fod_sarif.core.exceptions import ConfigurationError

MISSING_CREDENTIALS_MESSAGE = (
    "Either client-id and client-secret, or tenant, user and password must be specified"
)


@dataclass(frozen=True, slots=True)
class ClientCredentials:
    """OAuth2 client-credentials grant (API key and secret)."""

    client_id: str
    client_secret: str
    scope: str = AUTH_SCOPE

    def form(self) -> dict[str, str]:
        return {
            "scope": self.scope,
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }


@dataclass(frozen=True, slots=True)
class PasswordCredentials:
    """OAuth2 password grant; FoD expects ``<tenant>\\<user>`` as username."""

    tenant: str
    user: str
    password: str
    scope: str = AUTH_SCOPE

    @property
    def username(self) -> str:
        return f"{self.tenant}\\{self.user}"

    def form(self) -> dict[str, str]:
        return {
            "scope": self.scope,
            "grant_type": "password",
            "username": self.username,
            "password": self.password,
        }


Credentials = ClientCredentials | PasswordCredentials


def resolve_credentials(settings: Settings) -> Credentials:
    """Pick the grant to use from *settings*.

    Client credentials win when both the id and the secret are present;
    otherwise the tenant, user and password trio must be complete.

    Raises:
        ConfigurationError: If neither combination is complete.
    """
    if settings.client_id and settings.client_secret:
        return ClientCredentials(settings.client_id, settings.client_secret)
    if settings.tenant and settings.user and settings.password:
        return PasswordCredentials(settings.tenant, settings.user, settings.password)
    raise ConfigurationError(MISSING_CREDENTIALS_MESSAGE)
