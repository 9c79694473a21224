"""
Shared utilities for jobscan.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Text display helpers
"""

from jobscan.utils.text_processing import collapse_whitespace, preview, truncate_display

__all__ = ["collapse_whitespace", "preview", "truncate_display"]
