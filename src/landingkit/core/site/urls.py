"""Per-language URLs and output locations."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List


@dataclass(frozen=True)
class SiteUrl:
    lang: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"lang": self.lang, "url": self.url}


def build_site_urls(site_url: str, languages: Iterable[str], default_language: str) -> List[SiteUrl]:
    """Map each language to its public URL.

    Example:
        >>> build_site_urls("https://example.com/", ["en", "de"], "en")
        [SiteUrl(lang='en', url='https://example.com/'), SiteUrl(lang='de', url='https://example.com/de/')]
    """
    return [
        SiteUrl(lang=lang, url=site_url if lang == default_language else f"{site_url}{lang}/")
        for lang in languages
    ]


def page_dir(output_dir: Path, lang: str, default_language: str) -> Path:
    """Directory that holds the page for ``lang``."""
    return Path(output_dir) if lang == default_language else Path(output_dir) / lang


def page_path(output_dir: Path, lang: str, default_language: str) -> Path:
    """``index.html`` location for ``lang``."""
    return page_dir(output_dir, lang, default_language) / "index.html"


__all__ = ["SiteUrl", "build_site_urls", "page_dir", "page_path"]
