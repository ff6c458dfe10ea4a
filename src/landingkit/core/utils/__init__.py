"""Shared helpers: merging, file I/O and text cleanup."""
from __future__ import annotations

from .io import atomic_write, ensure_directory, read_json, read_text, read_yaml, write_text
from .merge import deep_merge, merge_arrays
from .text import strip_html

__all__ = [
    "atomic_write",
    "ensure_directory",
    "read_json",
    "read_text",
    "read_yaml",
    "write_text",
    "deep_merge",
    "merge_arrays",
    "strip_html",
]
