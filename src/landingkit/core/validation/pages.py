"""Locate built pages for validation."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from landingkit.core.config import SiteConfig
from landingkit.core.site.urls import page_path


@dataclass(frozen=True)
class BuiltPage:
    lang: str
    path: Path
    html: Optional[str]

    @property
    def exists(self) -> bool:
        return self.html is not None


def iter_built_pages(config: SiteConfig) -> Iterator[BuiltPage]:
    """Yield every configured language page, reading it when present."""
    for lang in config.languages:
        path = page_path(config.output_dir, lang, config.default_language)
        html = path.read_text(encoding="utf-8") if path.is_file() else None
        yield BuiltPage(lang=lang, path=path, html=html)


__all__ = ["BuiltPage", "iter_built_pages"]
