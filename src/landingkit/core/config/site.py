"""Typed accessor over the merged configuration."""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Any, Dict, List, Optional

from .manager import ConfigManager


class SiteConfig:
    """Read-only view of a landingkit configuration.

    Usage:
        cfg = SiteConfig(repo_root=Path("/path/to/site"))
        print(cfg.site_url, cfg.languages)

    Tests (and the ``render`` command) may pass an already merged ``config``
    dict; otherwise the config is loaded through ``ConfigManager``.
    """

    def __init__(self, repo_root: Optional[Path] = None, *, config: Optional[Dict[str, Any]] = None) -> None:
        if config is None:
            manager = ConfigManager(repo_root)
            self.repo_root = manager.repo_root
            self._config = manager.load_config()
        else:
            self.repo_root = Path(repo_root) if repo_root else Path.cwd()
            self._config = config

    @property
    def raw(self) -> Dict[str, Any]:
        return self._config

    def section(self, name: str) -> Dict[str, Any]:
        return self._config.get(name, {}) or {}

    @cached_property
    def site_url(self) -> str:
        return str(self.section("site")["url"])

    @cached_property
    def default_language(self) -> str:
        return str(self.section("site")["default_language"])

    @cached_property
    def languages(self) -> List[str]:
        return [str(lang) for lang in self.section("site").get("languages", [])]

    def _path(self, key: str) -> Path:
        value = Path(str(self.section("paths")[key]))
        return value if value.is_absolute() else self.repo_root / value

    @cached_property
    def template_path(self) -> Path:
        return self._path("template")

    @cached_property
    def translations_dir(self) -> Path:
        return self._path("translations_dir")

    @cached_property
    def output_dir(self) -> Path:
        return self._path("output_dir")

    def translation_path(self, lang: str) -> Path:
        return self.translations_dir / f"{lang}.json"

    @cached_property
    def strict(self) -> bool:
        return bool(self.section("templating").get("strict", False))

    @cached_property
    def quiet_variables(self) -> List[str]:
        return list(self.section("templating").get("quiet_variables", []) or [])

    @cached_property
    def quiet_prefixes(self) -> List[str]:
        return list(self.section("templating").get("quiet_prefixes", []) or [])

    @cached_property
    def expected_jsonld_types(self) -> List[str]:
        return list(self.section("validation").get("expected_jsonld_types", []) or [])

    @cached_property
    def opengraph(self) -> Dict[str, Any]:
        return dict(self.section("validation").get("opengraph", {}) or {})

    @cached_property
    def log_level(self) -> str:
        return str(self.section("logging").get("level") or "WARNING")

    @cached_property
    def log_file(self) -> Optional[Path]:
        raw = self.section("logging").get("file")
        if not raw:
            return None
        path = Path(str(raw))
        return path if path.is_absolute() else self.repo_root / path


__all__ = ["SiteConfig"]
