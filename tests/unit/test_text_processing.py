"""Unit tests for display helpers."""

import pytest

from jobscan.utils.text_processing import (
    collapse_whitespace,
    indent_block,
    preview,
    truncate_display,
)


@pytest.mark.unit
def test_truncate_display():
    assert truncate_display("short", 10) == "short"
    assert truncate_display("this is a very long string", 10) == "this is..."


@pytest.mark.unit
def test_collapse_whitespace():
    assert collapse_whitespace("  Build  things.\n\n  Ship them.\t") == "Build things. Ship them."


@pytest.mark.unit
def test_preview_is_single_line():
    text = "Responsibilities\n- Design APIs\n- Mentor developers\n" * 10
    result = preview(text, max_len=40)
    assert "\n" not in result
    assert len(result) == 40
    assert result.endswith("...")


@pytest.mark.unit
def test_indent_block():
    assert indent_block("a\nb", "  ") == "  a\n  b"
