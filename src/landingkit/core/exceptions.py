from __future__ import annotations

from typing import Any, Dict, Mapping


class LandingkitError(Exception):
    """Base exception for landingkit."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(LandingkitError, ValueError):
    """Raised when the merged configuration is missing or invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        LandingkitError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class BuildError(LandingkitError, RuntimeError):
    """Raised when a page or support file cannot be built."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        LandingkitError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class TranslationError(BuildError):
    """Raised when a ``<lang>.json`` translation file is unreadable or not an object."""


class StrictRenderError(BuildError):
    """Raised in strict mode when rendering produced diagnostics."""

    def __init__(
        self,
        message: str,
        *,
        lang: str | None = None,
        diagnostics: list[str] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if lang:
            ctx["lang"] = lang
        if diagnostics:
            ctx["diagnostics"] = list(diagnostics)
        super().__init__(message, context=ctx)
        self.lang = lang
        self.diagnostics = list(diagnostics or [])


__all__ = [
    "LandingkitError",
    "ConfigError",
    "BuildError",
    "TranslationError",
    "StrictRenderError",
]
