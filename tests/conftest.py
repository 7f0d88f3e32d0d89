# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and a respx-backed fake of the FoD API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
import pytest
import respx

from fod_sarif.client.throttle import RateLimiter
from fod_sarif.core.config import Settings

WEB_BASE = "https://ams.fortify.com"
API_HOST = "api.ams.fortify.com"
RELEASE_ID = "42"
SCAN_ID = 7
TOKEN = "tok-0123456789"

_FOD_ENV = (
    "BASE_URL", "RELEASE_ID", "TENANT", "USER", "PASSWORD", "CLIENT_ID",
    "CLIENT_SECRET", "OUTPUT", "DETAIL_RATE", "DETAIL_RATE_PERIOD",
    "DETAIL_CONCURRENCY", "PAGE_LIMIT", "REQUEST_TIMEOUT", "LOG_LEVEL", "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep FOD_* variables and any local .env file out of the tests."""
    for name in _FOD_ENV:
        monkeypatch.delenv(f"FOD_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging between tests."""
    yield
    root = logging.getLogger("fod_sarif")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


@pytest.fixture
def fast_limiter() -> RateLimiter:
    return RateLimiter(rate=1000, rate_per=0.001, concurrent=10)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        base_url=WEB_BASE,
        release_id=RELEASE_ID,
        client_id="client-abc",
        client_secret="secret-xyz",
        output=tmp_path / "out" / "fod.sarif",
    )


def make_release(
    *,
    status: str = "Completed",
    suspended: bool = False,
    critical: int = 0,
    high: int = 0,
    medium: int = 0,
    low: int = 0,
    issue_count: int | None = None,
) -> dict[str, Any]:
    return {
        "releaseId": int(RELEASE_ID),
        "releaseName": "1.0",
        "applicationName": "demo-app",
        "staticAnalysisStatusType": status,
        "suspended": suspended,
        "currentStaticScanId": SCAN_ID,
        "critical": critical,
        "high": high,
        "medium": medium,
        "low": low,
        "issueCount": critical + high + medium + low if issue_count is None else issue_count,
        "sdlcStatusType": "Development",
    }


def make_vuln(
    index: int,
    *,
    scantype: str = "Static",
    severity_string: str = "High",
    category: str = "SQL Injection",
) -> dict[str, Any]:
    return {
        "id": 1000 + index,
        "vulnId": f"vuln-{index}",
        "instanceId": f"INSTANCE{index:04d}",
        "category": category,
        "severity": 3,
        "severityString": severity_string,
        "scantype": scantype,
        "primaryLocationFull": f"src/main/java/App{index}.java",
        "lineNumber": 10 + index,
        "kingdom": "Input Validation and Representation",
    }


def make_detail(vuln_id: str, rule_id: str | None = None) -> dict[str, Any]:
    return {
        "ruleId": rule_id or f"rule-{vuln_id}",
        "summary": f"<p>Summary of <b>{vuln_id}</b></p>",
        "explanation": "<p>Explanation</p>",
        "recommendations": "<p>Fix it</p>",
    }


class FakeFod:
    """Stateful FoD API on top of a respx router.

    Tests mutate ``release``, ``vulns``, ``failing`` and ``rule_ids`` before
    running the code under test and inspect the routes afterwards.
    """

    def __init__(self, router: respx.MockRouter) -> None:
        self.release = make_release(high=1)
        self.scan_summary = {
            "scanId": SCAN_ID,
            "staticScanSummaryDetails": {
                "engineVersion": "23.1.0.0020",
                "rulePackVersion": "2023.2.0.0009",
            },
        }
        self.vulns: list[dict[str, Any]] = []
        self.failing: set[str] = set()
        self.rule_ids: dict[str, str] = {}
        self.total_count: int | None = None

        self.token = router.post(host=API_HOST, path="/oauth/token").mock(
            return_value=httpx.Response(200, json={"access_token": TOKEN, "token_type": "bearer"})
        )
        self.release_route = router.get(
            host=API_HOST, path=f"/api/v3/releases/{RELEASE_ID}"
        ).mock(side_effect=lambda request: httpx.Response(200, json=self.release))
        self.summary_route = router.get(
            host=API_HOST, path=f"/api/v3/scans/{SCAN_ID}/summary"
        ).mock(side_effect=lambda request: httpx.Response(200, json=self.scan_summary))
        self.index_route = router.get(
            host=API_HOST, path=f"/api/v3/releases/{RELEASE_ID}/vulnerabilities"
        ).mock(side_effect=self._page)
        self.detail_route = router.get(
            host=API_HOST,
            path__regex=rf"^/api/v3/releases/{RELEASE_ID}/vulnerabilities/[^/]+/details$",
        ).mock(side_effect=self._detail)

    def set_release(self, **kwargs: Any) -> None:
        self.release = make_release(**kwargs)

    def add_vulns(self, count: int, **kwargs: Any) -> list[dict[str, Any]]:
        start = len(self.vulns)
        added = [make_vuln(start + i, **kwargs) for i in range(count)]
        self.vulns.extend(added)
        return added

    def _page(self, request: httpx.Request) -> httpx.Response:
        offset = int(request.url.params["offset"])
        limit = int(request.url.params["limit"])
        total = len(self.vulns) if self.total_count is None else self.total_count
        return httpx.Response(
            200, json={"items": self.vulns[offset:offset + limit], "totalCount": total}
        )

    def _detail(self, request: httpx.Request) -> httpx.Response:
        vuln_id = request.url.path.split("/")[-2]
        if vuln_id in self.failing:
            return httpx.Response(500, text="Internal Server Error")
        return httpx.Response(200, json=make_detail(vuln_id, self.rule_ids.get(vuln_id)))

    @property
    def detail_ids(self) -> list[str]:
        return [call.request.url.path.split("/")[-2] for call in self.detail_route.calls]

    @property
    def page_offsets(self) -> list[int]:
        return [int(call.request.url.params["offset"]) for call in self.index_route.calls]


@pytest.fixture
def fod_api():
    with respx.mock(assert_all_called=False) as router:
        yield FakeFod(router)


@pytest.fixture
def release_payload():
    return make_release


@pytest.fixture
def vuln_payload():
    return make_vuln


@pytest.fixture
def detail_payload():
    return make_detail
