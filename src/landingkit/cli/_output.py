"""Unified CLI output formatting (JSON and text modes)."""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def success(self, data: Dict[str, Any], message: str, *, status: str = "success") -> None:
        """Output success result (``data`` in JSON mode, ``message`` in text mode)."""
        if self.json_mode:
            print(json.dumps({"status": status, **data}, indent=self.indent, default=str))
        else:
            print(message)

    def error(
        self,
        error: Exception | str,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Output error result to stderr."""
        msg = message or str(error)
        if self.json_mode:
            payload: Dict[str, Any] = {"error": error_code, "message": msg}
            if context:
                payload["context"] = context
            print(json.dumps(payload, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str = "") -> None:
        """Output a plain text line (suppressed in JSON mode)."""
        if not self.json_mode:
            print(message)

    def text_err(self, message: str = "") -> None:
        """Output a plain text line on stderr (suppressed in JSON mode)."""
        if not self.json_mode:
            print(message, file=sys.stderr)


def format_json(data: Any, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, default=str)


def print_success(message: str) -> None:
    """Print success message with checkmark."""
    print(f"✅ {message}")


def print_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"❌ {message}", file=sys.stderr)


__all__ = ["OutputFormatter", "format_json", "print_success", "print_error"]
