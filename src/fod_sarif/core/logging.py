# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Structured logging with sensitive data redaction.

Three formats: ``text`` for humans, ``json`` for log shippers and ``github``,
which turns warnings and errors into GitHub Actions workflow annotations.
CI runners timestamp every line, so the text formats carry no time.
"""

import json
import logging
import re
import sys
from typing import Any

REDACT_PATTERNS = [
    re.compile(r"(Bearer\s+[a-zA-Z0-9\-._~+/]{4})[a-zA-Z0-9\-._~+/=]*"),
    re.compile(r"""(["']?access_token["']?\s*[:=]\s*["']?)[^"'&,\s}]+"""),
    re.compile(r"""(["']?client_secret["']?\s*[:=]\s*["']?)[^"'&,\s}]+"""),
    re.compile(r"""(["']?password["']?\s*[:=]\s*["']?)[^"'&,\s}]+"""),
]

TEXT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
LOG_FORMATS = ("text", "json", "github")

_GITHUB_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def redact_sensitive(text: str) -> str:
    for pattern in REDACT_PATTERNS:
        text = pattern.sub(r"\1[REDACTED]", text)
    return text


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_sensitive(record.getMessage()),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = redact_sensitive(self.formatException(record.exc_info))
        return json.dumps(log_entry)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        return redact_sensitive(msg)


class GithubFormatter(logging.Formatter):
    """Emit ``::warning::``/``::error::`` workflow commands; INFO stays plain."""

    def format(self, record: logging.LogRecord) -> str:
        msg = redact_sensitive(record.getMessage())
        if record.exc_info and record.exc_info[1]:
            msg = f"{msg}\n{redact_sensitive(self.formatException(record.exc_info))}"
        command = _GITHUB_COMMANDS.get(record.levelno)
        if command is None:
            return msg
        # workflow commands are single-line
        escaped = msg.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        return f"::{command} title={record.name}::{escaped}"


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    root = logging.getLogger("fod_sarif")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    elif fmt == "github":
        handler.setFormatter(GithubFormatter())
    else:
        handler.setFormatter(TextFormatter(TEXT_FORMAT))
    root.addHandler(handler)
