"""
Text processing utilities for formatting and display.
"""

import re


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def collapse_whitespace(text: str) -> str:
    """
    Collapse all whitespace runs (including newlines) to single spaces.

    Example:
        >>> collapse_whitespace("Build  things.\\n\\n  Ship them.")
        'Build things. Ship them.'
    """
    return re.sub(r"\s+", " ", text).strip()


def preview(text: str, max_len: int = 120) -> str:
    """One-line preview of a possibly multi-line excerpt."""
    return truncate_display(collapse_whitespace(text), max_len)


def indent_block(text: str, prefix: str = "    ") -> str:
    """
    Indent every line of a block for nested report output.

    Example:
        >>> indent_block("a\\nb", "  ")
        '  a\\n  b'
    """
    return "\n".join(prefix + line for line in text.split("\n"))
