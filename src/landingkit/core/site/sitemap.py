"""sitemap.xml and robots.txt generation."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Sequence
from xml.sax.saxutils import quoteattr, escape

from landingkit.core.utils.io import write_text

from .urls import SiteUrl

logger = logging.getLogger(__name__)

SITEMAP_FILE = "sitemap.xml"
ROBOTS_FILE = "robots.txt"


def render_sitemap(urls: Sequence[SiteUrl], site_url: str, default_language: str) -> str:
    """Render a sitemap with one ``<url>`` entry and hreflang alternates.

    Every non-default language is listed as an ``xhtml:link`` alternate of
    the site root.
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>',
        "<urlset ",
        '  xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"',
        '  xmlns:xhtml="http://www.w3.org/1999/xhtml">',
        "  ",
        "  <url>",
        f"    <loc>{escape(site_url)}</loc>",
    ]
    for entry in urls:
        if entry.lang == default_language:
            continue
        lines.append(
            f"    <xhtml:link rel=\"alternate\" hreflang={quoteattr(entry.lang)} href={quoteattr(entry.url)} />"
        )
    lines.extend([
        "    <priority>1.0</priority>",
        "  </url>",
        "",
        "</urlset>",
    ])
    return "\n".join(lines) + "\n"


def render_robots(site_url: str) -> str:
    """Render robots.txt allowing everything and pointing at the sitemap."""
    return f"User-agent: *\nAllow: /\n\nSitemap: {site_url}{SITEMAP_FILE}\n"


def write_sitemap_files(
    output_dir: Path,
    urls: Sequence[SiteUrl],
    site_url: str,
    default_language: str,
) -> Dict[str, Path]:
    """Write sitemap.xml and robots.txt into ``output_dir``.

    Returns:
        Mapping of file name to written path
    """
    output_dir = Path(output_dir)
    sitemap_path = output_dir / SITEMAP_FILE
    robots_path = output_dir / ROBOTS_FILE

    write_text(sitemap_path, render_sitemap(urls, site_url, default_language))
    logger.info("Wrote %s", sitemap_path)
    write_text(robots_path, render_robots(site_url))
    logger.info("Wrote %s", robots_path)
    return {SITEMAP_FILE: sitemap_path, ROBOTS_FILE: robots_path}


__all__ = ["ROBOTS_FILE", "SITEMAP_FILE", "render_robots", "render_sitemap", "write_sitemap_files"]
