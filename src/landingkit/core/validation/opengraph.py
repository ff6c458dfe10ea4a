"""Open Graph meta tag validator.

Checks each built page for the required ``og:*`` tags, description length,
absolute URLs and tag shapes, then checks that the preview image referenced
by ``og:image`` exists locally and stays under the size limit.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from landingkit.core.config import SiteConfig

from .pages import BuiltPage, iter_built_pages
from .results import ValidatorResult

logger = logging.getLogger(__name__)

META_TAG_PATTERN = re.compile(
    r"<meta\s+(?:property|name)=[\"']([^\"']+)[\"']\s+content=[\"']([^\"']+)[\"']"
)
LOCALE_PATTERN = re.compile(r"[a-z]{2}_[A-Z]{2}")
ABSOLUTE_URL_TAGS = ("og:image", "og:logo", "og:url")

DEFAULT_RULES: Dict[str, Any] = {
    "required_tags": [
        "og:title",
        "og:description",
        "og:image",
        "og:type",
        "og:url",
        "og:site_name",
        "og:locale",
        "og:logo",
    ],
    "optional_tags": ["og:image:alt"],
    "description_min_length": 110,
    "description_max_length": 160,
    "common_types": ["website", "article", "book", "profile", "music", "video"],
    "max_image_kb": 600,
}


def extract_meta_tags(html: str) -> Dict[str, str]:
    """Map meta ``property``/``name`` to ``content``; later tags win."""
    return {m.group(1): m.group(2) for m in META_TAG_PATTERN.finditer(html)}


def _is_absolute(url: str) -> bool:
    return url.startswith("http://") or url.startswith("https://")


def check_tags(html: str, rules: Mapping[str, Any]) -> Dict[str, Any]:
    """Check Open Graph tags in one page.

    Returns:
        Dict with ``errors`` and ``warnings`` (lists of str) and ``found``
        (tag -> content for required and present optional tags)
    """
    meta = extract_meta_tags(html)
    errors: List[str] = []
    warnings: List[str] = []
    found: Dict[str, str] = {}

    for tag in rules["required_tags"]:
        content = meta.get(tag)
        if not content:
            errors.append(f"Missing required Open Graph tag: {tag}")
            continue
        found[tag] = content
        if not content.strip():
            errors.append(f"Open Graph tag {tag} has empty content")

    description = found.get("og:description")
    if description:
        length = len(description)
        low, high = rules["description_min_length"], rules["description_max_length"]
        if length < low:
            errors.append(f"og:description is too short: {length} characters (minimum: {low})")
        elif length > high:
            errors.append(f"og:description is too long: {length} characters (maximum: {high})")

    for tag in rules["optional_tags"]:
        if meta.get(tag):
            found[tag] = meta[tag]

    for tag in ABSOLUTE_URL_TAGS:
        url = found.get(tag)
        if url and not _is_absolute(url):
            errors.append(f"{tag} must be an absolute URL (found: {url})")

    og_type = found.get("og:type")
    common_types: Sequence[str] = rules["common_types"]
    if og_type and og_type not in common_types:
        warnings.append(
            f'og:type "{og_type}" is not a common type (common: {", ".join(common_types)})'
        )

    locale = found.get("og:locale")
    if locale and not LOCALE_PATTERN.fullmatch(locale):
        warnings.append(f'og:locale "{locale}" should follow format "xx_XX" (e.g., "en_US")')

    return {"errors": errors, "warnings": warnings, "found": found}


def image_path_for(url: str, site_url: str, output_dir: Path) -> Path:
    """Map an ``og:image`` URL to the file in the build output."""
    relative = url[len(site_url):] if url.startswith(site_url) else url
    return Path(output_dir) / relative.lstrip("/")


def check_image_size(path: Path, max_kb: float) -> Optional[str]:
    """Return an error message when the image is missing or too large."""
    if not path.is_file():
        return f"og:image file not found: {path}"
    size_kb = path.stat().st_size / 1024
    if size_kb > max_kb:
        return f"og:image file size {size_kb:.2f} KB exceeds maximum of {max_kb:g} KB"
    return None


def validate_opengraph(config: SiteConfig) -> ValidatorResult:
    """Validate Open Graph tags and the preview image on every page."""
    rules = {**DEFAULT_RULES, **config.opengraph}
    result = ValidatorResult(name="Open Graph")
    images: Dict[str, BuiltPage] = {}

    for page in iter_built_pages(config):
        file = str(page.path)
        if page.html is None:
            result.add_issue(f"Missing built HTML file: {file}", file=file, lang=page.lang)
            continue

        checked = check_tags(page.html, rules)
        for message in checked["warnings"]:
            result.add_warning(message, file=file, lang=page.lang)
        if checked["errors"]:
            for message in checked["errors"]:
                result.add_issue(message, file=file, lang=page.lang)
            continue

        result.notes.append(f"{page.lang}: All required Open Graph tags found")
        image_url = checked["found"].get("og:image")
        if image_url:
            images.setdefault(image_url, page)

    if not images:
        result.notes.append("No og:image URLs found to validate")

    max_kb = float(rules["max_image_kb"])
    for url, page in images.items():
        path = image_path_for(url, config.site_url, config.output_dir)
        error = check_image_size(path, max_kb)
        if error:
            result.add_issue(error, file=str(path), lang=page.lang)
        else:
            size_kb = path.stat().st_size / 1024
            result.notes.append(f"{path}: {size_kb:.2f} KB (max allowed: {max_kb:g} KB)")

    if result.ok:
        result.notes.append("Open Graph validation OK: all tags present and image size within limit")
    else:
        logger.info("Open Graph validation found %d issue(s)", len(result.issues))
    return result


__all__ = [
    "check_image_size",
    "check_tags",
    "extract_meta_tags",
    "image_path_for",
    "validate_opengraph",
]
