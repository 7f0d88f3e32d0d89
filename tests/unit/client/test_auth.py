# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for credential selection."""

from __future__ import annotations

import pytest

from fod_sarif.client.auth import (
    MISSING_CREDENTIALS_MESSAGE,
    ClientCredentials,
    PasswordCredentials,
    resolve_credentials,
)
from fod_sarif.core.config import Settings
from fod_sarif.core.exceptions import ConfigurationError


def _settings(**kwargs: str) -> Settings:
    return Settings(base_url="https://ams.fortify.com", release_id="1", **kwargs)


class TestResolveCredentials:
    def test_client_credentials_win_when_everything_is_set(self) -> None:
        creds = resolve_credentials(
            _settings(
                tenant="acme", user="jdoe", password="pw",
                client_id="id", client_secret="secret",
            )
        )
        assert creds == ClientCredentials("id", "secret")

    def test_password_trio(self) -> None:
        creds = resolve_credentials(_settings(tenant="acme", user="jdoe", password="pw"))
        assert isinstance(creds, PasswordCredentials)
        assert creds.username == "acme\\jdoe"

    def test_incomplete_client_pair_falls_back_to_password(self) -> None:
        creds = resolve_credentials(
            _settings(client_id="id", tenant="acme", user="jdoe", password="pw")
        )
        assert isinstance(creds, PasswordCredentials)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {},
            {"client_id": "id"},
            {"client_secret": "secret"},
            {"tenant": "acme", "user": "jdoe"},
            {"user": "jdoe", "password": "pw"},
        ],
    )
    def test_incomplete_inputs_fail_with_fixed_message(self, kwargs: dict[str, str]) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_credentials(_settings(**kwargs))
        assert str(exc_info.value) == (
            "Either client-id and client-secret, or tenant, user and password must be specified"
        )
        assert str(exc_info.value) == MISSING_CREDENTIALS_MESSAGE

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOD_CLIENT_ID", "env-id")
        monkeypatch.setenv("FOD_CLIENT_SECRET", "env-secret")
        creds = resolve_credentials(Settings())
        assert creds == ClientCredentials("env-id", "env-secret")


class TestTokenForms:
    def test_client_form(self) -> None:
        assert ClientCredentials("id", "secret").form() == {
            "scope": "view-apps view-issues",
            "grant_type": "client_credentials",
            "client_id": "id",
            "client_secret": "secret",
        }

    def test_password_form(self) -> None:
        assert PasswordCredentials("acme", "jdoe", "pw").form() == {
            "scope": "view-apps view-issues",
            "grant_type": "password",
            "username": "acme\\jdoe",
            "password": "pw",
        }
