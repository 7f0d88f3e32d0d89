# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for logging setup and secret redaction."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from fod_sarif.core.logging import (
    TEXT_FORMAT,
    GithubFormatter,
    JsonFormatter,
    TextFormatter,
    redact_sensitive,
    setup_logging,
)


class TestRedaction:
    @pytest.mark.parametrize(
        ("text", "secret"),
        [
            ("Authorization: Bearer abcdefghijklmnop", "efghijklmnop"),
            ('{"access_token": "tok-secret-value", "token_type": "bearer"}', "tok-secret-value"),
            ("grant_type=client_credentials&client_secret=s3cr3t&scope=x", "s3cr3t"),
            ("username=acme%5Calice&password=hunter2", "hunter2"),
        ],
    )
    def test_secrets_removed(self, text: str, secret: str) -> None:
        redacted = redact_sensitive(text)
        assert secret not in redacted
        assert "[REDACTED]" in redacted

    def test_plain_text_untouched(self) -> None:
        text = "Exported 3 results for release 42"
        assert redact_sensitive(text) == text


def _record(
    msg: str, level: int = logging.WARNING, exc_info=None
) -> logging.LogRecord:
    return logging.LogRecord("fod_sarif.test", level, __file__, 1, msg, None, exc_info)


def _exc_info():
    try:
        raise ValueError("password=hunter2")
    except ValueError:
        return sys.exc_info()


class TestFormatters:
    def test_json_formatter(self) -> None:
        entry = json.loads(JsonFormatter().format(_record("password=hunter2")))

        assert entry["level"] == "WARNING"
        assert entry["logger"] == "fod_sarif.test"
        assert entry["message"] == "password=[REDACTED]"

    def test_text_formatter(self) -> None:
        line = TextFormatter("%(levelname)s %(message)s").format(_record("client_secret=abc"))
        assert line == "WARNING client_secret=[REDACTED]"

    def test_default_text_format_has_no_timestamp(self) -> None:
        line = TextFormatter(TEXT_FORMAT).format(_record("hello"))
        assert line == "[WARNING] fod_sarif.test: hello"

    def test_json_formatter_includes_redacted_traceback(self) -> None:
        entry = json.loads(JsonFormatter().format(_record("failed", exc_info=_exc_info())))

        assert "Traceback" in entry["exception"]
        assert "hunter2" not in entry["exception"]


class TestGithubFormatter:
    @pytest.mark.parametrize(
        ("level", "prefix"),
        [
            (logging.WARNING, "::warning title=fod_sarif.test::"),
            (logging.ERROR, "::error title=fod_sarif.test::"),
            (logging.DEBUG, "::debug title=fod_sarif.test::"),
        ],
    )
    def test_annotations(self, level: int, prefix: str) -> None:
        assert GithubFormatter().format(_record("careful", level)) == f"{prefix}careful"

    def test_info_stays_plain(self) -> None:
        assert GithubFormatter().format(_record("progress", logging.INFO)) == "progress"

    def test_multiline_is_escaped_and_redacted(self) -> None:
        line = GithubFormatter().format(_record("100% done\npassword=hunter2"))

        assert line == "::warning title=fod_sarif.test::100%25 done%0Apassword=[REDACTED]"


class TestSetupLogging:
    def test_installs_single_handler(self) -> None:
        setup_logging("DEBUG")
        setup_logging("WARNING", "json")

        root = logging.getLogger("fod_sarif")
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_github_format(self) -> None:
        setup_logging("INFO", "github")
        assert isinstance(logging.getLogger("fod_sarif").handlers[0].formatter, GithubFormatter)

    def test_unknown_level_defaults_to_info(self) -> None:
        setup_logging("chatty")
        assert logging.getLogger("fod_sarif").level == logging.INFO
