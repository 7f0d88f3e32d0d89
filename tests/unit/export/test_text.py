# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for HTML to text conversion."""

from __future__ import annotations

import pytest

from fod_sarif.export.text import html_to_text


@pytest.mark.parametrize(
    ("html", "expected"),
    [
        (None, ""),
        ("", ""),
        ("plain text", "plain text"),
        ("<p>a</p><p>b</p>", "a\n\nb"),
        ("a<br>b", "a\nb"),
        ("a<br/>b", "a\nb"),
        ("<ul><li>one</li><li>two</li></ul>", "* one\n* two"),
        ("&lt;script&gt; &amp; more", "<script> & more"),
        ("<script>alert(1)</script>Hello", "Hello"),
        ("<b>bold</b>   and \t <i>italic</i>", "bold and italic"),
        ("<p>a</p><br><br><br><p>b</p>", "a\n\nb"),
    ],
)
def test_html_to_text(html: str | None, expected: str) -> None:
    assert html_to_text(html) == expected


def test_preformatted_text_keeps_indentation() -> None:
    html = "<p>Code:</p><pre>if (a)\n    b();</pre>"
    assert html_to_text(html) == "Code:\n\nif (a)\n    b();"


def test_source_newlines_are_preserved_and_not_wrapped() -> None:
    long_line = "word " * 60
    text = html_to_text(f"first line\nsecond line {long_line}")
    lines = text.splitlines()
    assert lines[0] == "first line"
    assert lines[1] == f"second line {long_line}".rstrip()
