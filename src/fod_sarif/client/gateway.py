# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Async HTTP gateway for the Fortify on Demand REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from fod_sarif import __version__
from fod_sarif.client.auth import Credentials
from fod_sarif.core.exceptions import ApiError, AuthenticationError

logger = logging.getLogger("fod_sarif.client.gateway")

TOKEN_PATH = "/oauth/token"
_TIMEOUT = 30.0
_USER_AGENT = f"fod-sarif/{__version__}"


def api_base_url(base_url: str) -> str:
    """Return the API endpoint for a FoD portal URL.

    ``https://ams.fortify.com`` becomes ``https://api.ams.fortify.com``;
    hosts that already start with ``api`` are left alone.
    """
    try:
        url = httpx.URL(base_url.strip())
    except httpx.InvalidURL as exc:
        msg = f"Invalid FoD base URL: {base_url!r}"
        raise ValueError(msg) from exc
    if not url.host:
        msg = f"Invalid FoD base URL: {base_url!r}"
        raise ValueError(msg)
    if not url.host.startswith("api"):
        url = url.copy_with(host=f"api.{url.host}")
    return str(url).rstrip("/")


def _check_response(resp: httpx.Response, context: str) -> Any:
    """Raise ``ApiError`` for non-2xx responses, otherwise decode the JSON body."""
    if not resp.is_success:
        msg = f"{context}: HTTP {resp.status_code}"
        body = resp.text[:200]
        if body:
            msg = f"{msg} - {body}"
        raise ApiError(msg, status_code=resp.status_code)
    try:
        return resp.json()
    except ValueError as exc:
        msg = f"{context}: invalid JSON response ({exc})"
        raise ApiError(msg, status_code=resp.status_code) from exc


class FodGateway:
    """Prefix-bound client for the FoD API.

    Parameters
    ----------
    base_url:
        FoD portal or API URL; rewritten with :func:`api_base_url`.
    token:
        Bearer token attached to every request. ``None`` for the token
        exchange itself.
    timeout:
        Per-request timeout in seconds.
    transport:
        Optional httpx transport (used by tests).
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float = _TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = api_base_url(base_url)
        self.timeout = timeout
        headers = {"User-Agent": _USER_AGENT, "Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def __aenter__(self) -> FodGateway:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET *path* and return the decoded JSON body."""
        try:
            resp = await self._client.get(path, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ApiError(f"GET {path}: {exc}") from exc
        return _check_response(resp, f"GET {path}")

    async def post(self, path: str, form: dict[str, str]) -> Any:
        """POST a form-encoded body to *path* and return the decoded JSON body."""
        try:
            resp = await self._client.post(path, data=form)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ApiError(f"POST {path}: {exc}") from exc
        return _check_response(resp, f"POST {path}")

    @classmethod
    async def authenticate(
        cls,
        base_url: str,
        credentials: Credentials,
        *,
        timeout: float = _TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> FodGateway:
        """Exchange *credentials* for a bearer token.

        Returns a new gateway carrying ``Authorization: Bearer <token>``.

        Raises:
            AuthenticationError: If the token endpoint fails or returns no token.
        """
        async with cls(base_url, timeout=timeout, transport=transport) as anonymous:
            try:
                body = await anonymous.post(TOKEN_PATH, credentials.form())
            except ApiError as exc:
                raise AuthenticationError(f"Authentication failed: {exc}") from exc

        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            msg = "Authentication failed: token response has no access_token"
            raise AuthenticationError(msg)

        logger.info("Authenticated against %s", anonymous.base_url)
        return cls(base_url, token=token, timeout=timeout, transport=transport)
