"""Translation data enrichment.

The template only reads the render context, so every derived value the page
needs is computed here before rendering: cache-busting version, hreflang
alternates, the copyright year, and the schema.org objects embedded as
JSON-LD.
"""
from __future__ import annotations

import copy
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from landingkit.core.utils.text import strip_html

from .urls import SiteUrl

logger = logging.getLogger(__name__)

SCHEMA_CONTEXT = "https://schema.org"
YEAR_PLACEHOLDER = "{year}"


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return ``data[key]``, replacing a missing or non-object value with ``{}``."""
    value = data.get(key)
    if not isinstance(value, dict):
        value = {}
        data[key] = value
    return value


def _get(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _set_or_drop(target: Dict[str, Any], key: str, value: Any) -> None:
    if value is None:
        target.pop(key, None)
    else:
        target[key] = value


def _compact(obj: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None (absent in the source data)."""
    return {k: v for k, v in obj.items() if v is not None}


def build_howto_steps(steps: Any) -> List[Dict[str, Any]]:
    """``HowToStep`` objects from ``how_it_works.steps``."""
    if not isinstance(steps, list):
        return []
    return [
        _compact({
            "@type": "HowToStep",
            "name": strip_html(_get(step, "title")),
            "text": strip_html(_get(step, "description")),
        })
        for step in steps
    ]


def build_faq_page(faq: List[Any]) -> Dict[str, Any]:
    """``FAQPage`` object from ``seo.faq``."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            _compact({
                "@type": "Question",
                "name": strip_html(_get(entry, "question")),
                "acceptedAnswer": _compact({
                    "@type": "Answer",
                    "text": strip_html(_get(entry, "answer")),
                }),
            })
            for entry in faq
        ],
    }


def build_breadcrumb_list(home_label: Any, canonical: Any) -> Dict[str, Any]:
    """Single-item ``BreadcrumbList`` for the landing page."""
    item: Dict[str, Any] = {"@type": "ListItem", "position": 1}
    _set_or_drop(item, "name", home_label)
    _set_or_drop(item, "item", canonical)
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [item],
    }


def enrich_structured_data(data: Dict[str, Any]) -> None:
    """Fill ``seo.structured_data`` from page content (in place)."""
    seo = _section(data, "seo")
    structured = _section(seo, "structured_data")
    canonical = _get(data, "meta", "canonical")

    software = structured.get("software_application")
    if isinstance(software, dict):
        _set_or_drop(software, "url", canonical)
        _set_or_drop(software, "downloadUrl", _get(data, "header", "download_url"))

    website = structured.get("website")
    if isinstance(website, dict):
        _set_or_drop(website, "url", canonical)

    howto = structured.get("howto")
    if isinstance(howto, dict):
        steps = _get(data, "how_it_works", "steps")
        if isinstance(steps, list):
            howto["step"] = build_howto_steps(steps)
        if not howto.get("step"):
            howto["step"] = []

    faq = seo.get("faq")
    if isinstance(faq, list):
        structured["faqpage"] = build_faq_page(faq)

    structured["breadcrumb_list"] = build_breadcrumb_list(seo.get("breadcrumb_home"), canonical)


def enrich_context(
    data: Dict[str, Any],
    *,
    site_url: str,
    urls: Sequence[SiteUrl],
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Return a copy of ``data`` with build-time fields added.

    Args:
        data: Parsed ``<lang>.json`` translation object (not modified)
        site_url: Public site root URL
        urls: Alternate-language URLs for hreflang links
        now: Build clock (default: current time)
    """
    now = now or datetime.now()
    result = copy.deepcopy(data)

    meta = _section(result, "meta")
    meta["version"] = int(now.timestamp() * 1000)
    meta["alternate_default"] = site_url
    meta["alternate_languages"] = [u.to_dict() for u in urls]

    footer = result.get("footer")
    if isinstance(footer, dict) and isinstance(footer.get("copyright"), str):
        footer["copyright"] = footer["copyright"].replace(YEAR_PLACEHOLDER, str(now.year))

    enrich_structured_data(result)
    logger.debug("Enriched context with %d alternate URL(s)", len(urls))
    return result


__all__ = [
    "build_breadcrumb_list",
    "build_faq_page",
    "build_howto_steps",
    "enrich_context",
    "enrich_structured_data",
]
