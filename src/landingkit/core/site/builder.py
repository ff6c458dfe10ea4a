"""Site builder: urls.txt plus one rendered page per language."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from landingkit.core.config import SiteConfig
from landingkit.core.exceptions import BuildError, StrictRenderError, TranslationError
from landingkit.core.templating import RenderReport, TemplateEngine
from landingkit.core.utils.io import read_json, read_text, write_text

from .context import enrich_context
from .urls import SiteUrl, build_site_urls, page_path

logger = logging.getLogger(__name__)

URLS_FILE = "urls.txt"


@dataclass
class PageResult:
    lang: str
    path: Path
    report: RenderReport

    def to_dict(self) -> Dict[str, Any]:
        return {"lang": self.lang, "path": str(self.path), "report": self.report.to_dict()}


@dataclass
class BuildResult:
    """Files written by one build."""

    urls_path: Optional[Path] = None
    pages: List[PageResult] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return any(page.report.has_issues for page in self.pages)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "urls_path": str(self.urls_path) if self.urls_path else None,
            "pages": [page.to_dict() for page in self.pages],
        }


class SiteBuilder:
    """Build every configured language page.

    Usage:
        cfg = SiteConfig(repo_root)
        result = SiteBuilder(cfg).build()
    """

    def __init__(
        self,
        config: SiteConfig,
        *,
        strict: Optional[bool] = None,
        now: Optional[datetime] = None,
    ) -> None:
        self.config = config
        self.strict = config.strict if strict is None else strict
        self.now = now
        self.engine = TemplateEngine(
            quiet_variables=config.quiet_variables,
            quiet_prefixes=config.quiet_prefixes,
        )

    @property
    def urls(self) -> List[SiteUrl]:
        return build_site_urls(self.config.site_url, self.config.languages, self.config.default_language)

    def write_urls_file(self) -> Path:
        path = self.config.output_dir / URLS_FILE
        write_text(path, "\n".join(u.url for u in self.urls))
        logger.info("Wrote %s", path)
        return path

    def load_template(self) -> str:
        path = self.config.template_path
        try:
            return read_text(path)
        except OSError as exc:
            raise BuildError(f"Cannot read template {path}: {exc}", context={"path": str(path)}) from exc

    def load_translation(self, lang: str) -> Dict[str, Any]:
        path = self.config.translation_path(lang)
        try:
            data = read_json(path)
        except (OSError, json.JSONDecodeError) as exc:
            raise TranslationError(
                f"Cannot load translations for '{lang}' from {path}: {exc}",
                context={"lang": lang, "path": str(path)},
            ) from exc
        if not isinstance(data, dict):
            raise TranslationError(
                f"Translations for '{lang}' must be a JSON object: {path}",
                context={"lang": lang, "path": str(path)},
            )
        return data

    def build_page(self, lang: str, template: str) -> PageResult:
        """Render and write the page for one language."""
        data = enrich_context(
            self.load_translation(lang),
            site_url=self.config.site_url,
            urls=self.urls,
            now=self.now or datetime.now(),
        )
        html, report = self.engine.render(
            template,
            data,
            name=lang,
            template_path=self.config.template_path,
        )
        if self.strict and report.has_issues:
            raise StrictRenderError(
                f"Rendering '{lang}' produced {len(report.diagnostics)} diagnostic(s)",
                lang=lang,
                diagnostics=report.warnings,
            )

        out = page_path(self.config.output_dir, lang, self.config.default_language)
        write_text(out, html)
        logger.info("Built %s page: %s", lang, out)
        return PageResult(lang=lang, path=out, report=report)

    def build(self) -> BuildResult:
        result = BuildResult(urls_path=self.write_urls_file())
        template = self.load_template()
        for lang in self.config.languages:
            result.pages.append(self.build_page(lang, template))
        return result


__all__ = ["BuildResult", "PageResult", "SiteBuilder", "URLS_FILE"]
