"""Text cleanup for values copied into structured data."""
from __future__ import annotations

import re
from typing import Any

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")


def strip_html(value: Any) -> Any:
    """Replace HTML tags with spaces and collapse whitespace.

    Non-string values are returned unchanged.

    Example:
        >>> strip_html("Tap <b>Boost</b>\\n now")
        'Tap Boost now'
    """
    if not isinstance(value, str):
        return value
    return _WS_RE.sub(" ", _TAG_RE.sub(" ", value)).strip()


__all__ = ["strip_html"]
