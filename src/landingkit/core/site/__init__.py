"""Site generation: URLs, context enrichment, pages, sitemap and robots."""
from __future__ import annotations

from .builder import BuildResult, PageResult, SiteBuilder
from .context import enrich_context
from .sitemap import render_robots, render_sitemap, write_sitemap_files
from .urls import SiteUrl, build_site_urls, page_path

__all__ = [
    "BuildResult",
    "PageResult",
    "SiteBuilder",
    "enrich_context",
    "render_robots",
    "render_sitemap",
    "write_sitemap_files",
    "SiteUrl",
    "build_site_urls",
    "page_path",
]
